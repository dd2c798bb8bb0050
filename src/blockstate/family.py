"""
Enum Families

A family is a named, closed, ordered set of variants describing one discrete
state axis of a block (facing, bed part, wall connection, ...).

Each declared family becomes a StateEnum subclass:
    - members are payload-free tags, value == ordinal
    - canonical names are derived once from the identifiers
    - parse() maps text back to a member by exact match

ARCHITECTURAL RULE:
    Tables are built once, when the family is declared, and are read-only
    afterwards. parse() and canonical_name are plain lookups, safe to call
    from any number of threads without locking.

    Canonical names are never hand-authored. They come from
    naming.to_canonical_name() and nothing else.
"""

import warnings
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Dict, Iterable, Iterator, List, Optional, Tuple, Type

from .naming import (
    has_adjacent_capitals,
    is_valid_identifier,
    to_canonical_name,
    to_member_name,
)


class NoMatchingVariant(ValueError):
    """
    Raised by parse() when the text is not the canonical name of any variant.

    Properties:
        family: Name of the family that was asked to parse
        text: The offending input, unchanged
    """

    def __init__(self, family: str, text: object):
        self.family = family
        self.text = text
        super().__init__(f"{text!r} is not a variant of {family}")


class DeclarationError(Exception):
    """Raised when a family declaration is malformed."""
    pass


class CanonicalNameCollision(DeclarationError):
    """Raised when two variants of one family derive the same canonical name."""
    pass


@dataclass(frozen=True)
class FamilyDeclaration:
    """
    Declares one family: its name and ordered variant identifiers.

    Example:
        FamilyDeclaration(
            name="WallConnection",
            variants=("None", "Low", "Tall"),
            doc="How a wall connects to a given direction.",
        )

    Properties:
        name: Family (class) name
        variants: Identifiers in declaration order; order defines ordinals
        doc: Optional docstring for the generated class
    """

    name: str
    variants: Tuple[str, ...]
    doc: Optional[str] = None


class StateEnum(Enum):
    """
    Base class of every generated family.

    Do not subclass by hand; use build_family().
    """

    @property
    def ordinal(self) -> int:
        return self.value

    @property
    def identifier(self) -> str:
        """Source-form identifier, e.g. "IronXylophone"."""
        return type(self)._identifiers[self.value]

    @property
    def canonical_name(self) -> str:
        """Canonical name, e.g. "iron_xylophone"."""
        return type(self)._canonical_names[self.value]

    def __str__(self) -> str:
        return self.canonical_name

    @classmethod
    def family_name(cls) -> str:
        return cls.__name__

    @classmethod
    def canonical_names(cls) -> Tuple[str, ...]:
        return cls._canonical_names

    @classmethod
    def parse(cls, text: str) -> "StateEnum":
        """
        Find the variant whose canonical name is exactly `text`.

        No trimming or case folding is applied.

        Raises:
            NoMatchingVariant: If no variant has that canonical name
        """
        try:
            return cls._by_canonical_name[text]
        except (KeyError, TypeError):
            raise NoMatchingVariant(cls.__name__, text) from None

    @classmethod
    def try_parse(cls, text: str, default: Optional["StateEnum"] = None) -> Optional["StateEnum"]:
        """Like parse(), but returns `default` when nothing matches."""
        try:
            return cls.parse(text)
        except NoMatchingVariant:
            return default


def _check_declaration(declaration: FamilyDeclaration) -> List[str]:
    """Validate a declaration and return its canonical names in order."""
    if not is_valid_identifier(declaration.name):
        raise DeclarationError(f"Invalid family name: {declaration.name!r}")
    if not declaration.variants:
        raise DeclarationError(f"Family {declaration.name} declares no variants")

    # For identifiers of the checked shape the conversion is injective, so
    # in practice a collision means the same identifier was declared twice.
    owner_by_name: Dict[str, str] = {}
    names = []
    for identifier in declaration.variants:
        if not is_valid_identifier(identifier):
            raise DeclarationError(
                f"Invalid variant identifier in {declaration.name}: {identifier!r}"
            )

        if has_adjacent_capitals(identifier):
            warnings.warn(
                f"{declaration.name}.{identifier} has adjacent capitals and will be "
                f"split letter by letter",
                UserWarning,
                stacklevel=3,
            )

        name = to_canonical_name(identifier)
        if name in owner_by_name:
            raise CanonicalNameCollision(
                f"{declaration.name}: {owner_by_name[name]} and {identifier} "
                f"both map to {name!r}"
            )
        owner_by_name[name] = identifier
        names.append(name)
    return names


def build_family(declaration: FamilyDeclaration, module: Optional[str] = None) -> Type[StateEnum]:
    """
    Generate the StateEnum subclass for one declaration.

    Args:
        declaration: Family to build
        module: Module the class is published from (needed for pickling)

    Returns:
        The new enum class

    Raises:
        DeclarationError: Malformed name or identifiers
        CanonicalNameCollision: Two variants share a canonical name
    """
    names = _check_declaration(declaration)

    members = [
        (to_member_name(identifier), ordinal)
        for ordinal, identifier in enumerate(declaration.variants)
    ]
    family = StateEnum(declaration.name, members, module=module, qualname=declaration.name)
    if declaration.doc:
        family.__doc__ = declaration.doc

    family._identifiers = tuple(declaration.variants)
    family._canonical_names = tuple(names)
    family._by_canonical_name = MappingProxyType(
        {name: family(ordinal) for ordinal, name in enumerate(names)}
    )
    return family


class FamilyRegistry:
    """
    All families generated from one list of declarations.

    Every family is built in the constructor; the registry never changes
    afterwards.

    Example:
        registry = FamilyRegistry([
            FamilyDeclaration("BedPart", ("Foot", "Head")),
        ])
        registry["BedPart"].parse("head")
    """

    def __init__(self, declarations: Iterable[FamilyDeclaration], module: Optional[str] = None):
        families: Dict[str, Type[StateEnum]] = {}
        for declaration in declarations:
            if declaration.name in families:
                raise DeclarationError(f"Family declared twice: {declaration.name}")
            families[declaration.name] = build_family(declaration, module=module)
        self._families = MappingProxyType(families)

    def __getitem__(self, name: str) -> Type[StateEnum]:
        return self._families[name]

    def __contains__(self, name: object) -> bool:
        return name in self._families

    def __iter__(self) -> Iterator[Type[StateEnum]]:
        return iter(self._families.values())

    def __len__(self) -> int:
        return len(self._families)

    def get(self, name: str) -> Optional[Type[StateEnum]]:
        """
        Retrieve a family by name.

        Returns:
            Family class or None if not declared
        """
        return self._families.get(name)

    def names(self) -> List[str]:
        return list(self._families)

    def parse(self, family_name: str, text: str) -> StateEnum:
        """
        Parse `text` as a variant of the named family.

        Raises:
            KeyError: Unknown or unhashable family name
            NoMatchingVariant: Unknown text
        """
        try:
            family = self._families[family_name]
        except TypeError:
            raise KeyError(family_name) from None
        return family.parse(text)
