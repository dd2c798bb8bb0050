"""
Tests for enum family generation and the family registry.

These tests verify:
    - Generated members, ordinals and canonical names
    - parse(): exact match, rejection, no normalization
    - try_parse() fallback
    - Declaration checks (invalid identifiers, collisions, duplicates)
    - Registry lookup
"""

import copy
import pickle
import threading

import pytest
from blockstate.family import (
    CanonicalNameCollision,
    DeclarationError,
    FamilyDeclaration,
    FamilyRegistry,
    NoMatchingVariant,
    StateEnum,
    build_family,
)
from blockstate.values import WallConnection


@pytest.fixture
def shade():
    return build_family(
        FamilyDeclaration(
            name="LampShade",
            variants=("None", "Paper", "StainedGlass"),
            doc="Shade on a lamp.",
        )
    )


class TestBuildFamily:
    """Test the generated enum class."""

    def test_is_state_enum(self, shade):
        assert issubclass(shade, StateEnum)
        assert shade.__name__ == "LampShade"
        assert shade.family_name() == "LampShade"
        assert shade.__doc__ == "Shade on a lamp."

    def test_members_in_declaration_order(self, shade):
        assert [m.name for m in shade] == ["NONE", "PAPER", "STAINED_GLASS"]
        assert [m.ordinal for m in shade] == [0, 1, 2]

    def test_identifier_and_canonical_name(self, shade):
        assert shade.STAINED_GLASS.identifier == "StainedGlass"
        assert shade.STAINED_GLASS.canonical_name == "stained_glass"
        assert str(shade.STAINED_GLASS) == "stained_glass"

    def test_canonical_names(self, shade):
        assert shade.canonical_names() == ("none", "paper", "stained_glass")

    def test_closed(self, shade):
        """A generated family cannot be extended."""
        with pytest.raises(TypeError):
            class MoreShades(shade):
                EXTRA = 3

    def test_equality_and_hash(self, shade):
        assert shade.PAPER == shade.PAPER
        assert shade.PAPER != shade.NONE
        assert len({shade.PAPER, shade.PAPER, shade.NONE}) == 2

    def test_copy_returns_same_member(self, shade):
        assert copy.copy(shade.PAPER) is shade.PAPER
        assert copy.deepcopy(shade.PAPER) is shade.PAPER

    def test_families_are_distinct_types(self, shade):
        """NONE in one family is not NONE in another."""
        assert shade.NONE != WallConnection.NONE

    def test_picklable_when_published(self):
        assert pickle.loads(pickle.dumps(WallConnection.TALL)) is WallConnection.TALL


class TestParse:
    """Test parse() and try_parse()."""

    def test_round_trip(self, shade):
        for member in shade:
            assert shade.parse(member.canonical_name) is member

    def test_unknown_text(self, shade):
        with pytest.raises(NoMatchingVariant):
            shade.parse("wood")

    def test_identifier_form_rejected(self, shade):
        with pytest.raises(NoMatchingVariant):
            shade.parse("StainedGlass")

    def test_member_name_rejected(self, shade):
        with pytest.raises(NoMatchingVariant):
            shade.parse("STAINED_GLASS")

    def test_missing_separator_rejected(self, shade):
        with pytest.raises(NoMatchingVariant):
            shade.parse("stainedglass")

    @pytest.mark.parametrize("text", [" paper", "paper ", "paper\n", "Paper", ""])
    def test_no_normalization(self, shade, text):
        with pytest.raises(NoMatchingVariant):
            shade.parse(text)

    @pytest.mark.parametrize("value", [None, 1, b"paper", ["paper"]])
    def test_non_string_rejected(self, shade, value):
        with pytest.raises(NoMatchingVariant):
            shade.parse(value)

    def test_error_carries_diagnostics(self, shade):
        with pytest.raises(NoMatchingVariant) as exc_info:
            shade.parse("glass")
        assert exc_info.value.family == "LampShade"
        assert exc_info.value.text == "glass"
        assert "LampShade" in str(exc_info.value)

    def test_error_is_value_error(self, shade):
        with pytest.raises(ValueError):
            shade.parse("glass")

    def test_try_parse_default(self, shade):
        assert shade.try_parse("paper") is shade.PAPER
        assert shade.try_parse("glass") is None
        assert shade.try_parse("glass", default=shade.NONE) is shade.NONE

    def test_concurrent_parse(self, shade):
        results = []

        def worker():
            results.append([shade.parse(name) for name in shade.canonical_names()])

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert all(r == list(shade) for r in results)


class TestDeclarationChecks:
    """Test malformed declarations."""

    def test_repeated_identifier_collides(self):
        """A variant declared twice would be unreachable through parse()."""
        with pytest.raises(CanonicalNameCollision) as exc_info:
            build_family(FamilyDeclaration("Clash", ("Low", "Tall", "Low")))
        assert "Clash" in str(exc_info.value)
        assert "'low'" in str(exc_info.value)

    def test_collision_is_declaration_error(self):
        with pytest.raises(DeclarationError):
            build_family(FamilyDeclaration("Clash", ("SingleWall", "SingleWall")))

    def test_similar_identifiers_do_not_collide(self):
        family = build_family(FamilyDeclaration("Near", ("Ab", "AbC", "Abc")))
        assert family.canonical_names() == ("ab", "ab_c", "abc")

    def test_empty_family(self):
        with pytest.raises(DeclarationError):
            build_family(FamilyDeclaration("Empty", ()))

    @pytest.mark.parametrize("identifier", ["low", "", "Iron_Xylophone", "3D"])
    def test_invalid_identifier(self, identifier):
        with pytest.raises(DeclarationError):
            build_family(FamilyDeclaration("Bad", ("Good", identifier)))

    def test_invalid_family_name(self):
        with pytest.raises(DeclarationError):
            build_family(FamilyDeclaration("bad_name", ("Good",)))

    def test_adjacent_capitals_warn(self):
        with pytest.warns(UserWarning, match="adjacent capitals"):
            family = build_family(FamilyDeclaration("Explosive", ("TNTBlock",)))
        assert family.parse("t_n_t_block").identifier == "TNTBlock"


class TestFamilyRegistry:
    """Test the registry of generated families."""

    def build_registry(self):
        return FamilyRegistry([
            FamilyDeclaration("BedPart", ("Foot", "Head")),
            FamilyDeclaration("DoorHinge", ("Left", "Right")),
        ])

    def test_lookup(self):
        registry = self.build_registry()
        assert len(registry) == 2
        assert "BedPart" in registry
        assert "Missing" not in registry
        assert registry.get("Missing") is None
        assert registry["DoorHinge"].RIGHT.canonical_name == "right"
        assert registry.names() == ["BedPart", "DoorHinge"]

    def test_iteration_order(self):
        registry = self.build_registry()
        assert [f.family_name() for f in registry] == ["BedPart", "DoorHinge"]

    def test_parse_by_family_name(self):
        registry = self.build_registry()
        assert registry.parse("BedPart", "head") is registry["BedPart"].HEAD

    def test_parse_unknown_family(self):
        with pytest.raises(KeyError):
            self.build_registry().parse("Missing", "head")

    def test_parse_unhashable_family_name(self):
        """An unhashable family name is reported as an unknown family."""
        with pytest.raises(KeyError):
            self.build_registry().parse(["BedPart"], "head")

    def test_no_runtime_registration(self):
        """Families are fixed once the registry is constructed."""
        registry = self.build_registry()
        assert not hasattr(registry, "declare")
        assert not hasattr(registry, "register")
        with pytest.raises(TypeError):
            registry._families["Extra"] = registry["BedPart"]

    def test_parse_unknown_text(self):
        with pytest.raises(NoMatchingVariant):
            self.build_registry().parse("BedPart", "tail")

    def test_duplicate_family(self):
        with pytest.raises(DeclarationError, match="twice"):
            FamilyRegistry([
                FamilyDeclaration("BedPart", ("Foot", "Head")),
                FamilyDeclaration("BedPart", ("Foot",)),
            ])

    def test_collision_stops_construction(self):
        with pytest.raises(CanonicalNameCollision):
            FamilyRegistry([FamilyDeclaration("Clash", ("Ab", "Ab"))])
