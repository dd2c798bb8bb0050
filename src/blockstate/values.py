"""
Block State Values

The declared catalog of state axes. This module is data only: a list of
family declarations, built once at import into REGISTRY, and one module
attribute per family.

See the block definitions (external) for which blocks use which axis.

Example:
    >>> from blockstate.values import Instrument
    >>> Instrument.IRON_XYLOPHONE.canonical_name
    'iron_xylophone'
    >>> Instrument.parse("cow_bell")
    <Instrument.COW_BELL: 6>
"""

from .family import FamilyDeclaration, FamilyRegistry


FAMILIES = (
    FamilyDeclaration(
        name="BlockFace",
        doc="Direction a block is facing in.",
        variants=(
            "South",
            "SouthSouthwest",
            "Southwest",
            "WestSouthwest",
            "West",
            "WestNorthwest",
            "Northwest",
            "NorthNorthwest",
            "North",
            "NorthNortheast",
            "Northeast",
            "EastNortheast",
            "East",
            "EastSoutheast",
            "Southeast",
            "SouthSoutheast",
        ),
    ),
    FamilyDeclaration(
        name="BambooLeaves",
        doc="Size of bamboo leaves.",
        variants=("None", "Small", "Large"),
    ),
    FamilyDeclaration(
        name="BedPart",
        doc="Part of a bed.",
        variants=("Foot", "Head"),
    ),
    FamilyDeclaration(
        name="BellAttachment",
        doc="How a bell is attached.",
        variants=("Ceiling", "Floor", "SingleWall", "DoubleWall"),
    ),
    FamilyDeclaration(
        name="Axis",
        doc="An axis. Used for bone blocks, portal blocks, chains, etc.",
        variants=("X", "Y", "Z"),
    ),
    FamilyDeclaration(
        name="AttachedFace",
        doc="Block face a button or grindstone is attached to.",
        variants=("Ceiling", "Floor", "Wall"),
    ),
    FamilyDeclaration(
        name="ChestType",
        doc=(
            "Type of a chest. LEFT and RIGHT are halves of a double chest, "
            "named for the side this block is on."
        ),
        variants=("Single", "Left", "Right"),
    ),
    FamilyDeclaration(
        name="BlockHalf",
        doc="Which half of a door or flower block is.",
        variants=("Lower", "Upper"),
    ),
    FamilyDeclaration(
        name="StairHalf",
        doc="Which half of stairs.",
        variants=("Bottom", "Top"),
    ),
    FamilyDeclaration(
        name="DoorHinge",
        doc="To which side a door's hinge is.",
        variants=("Left", "Right"),
    ),
    FamilyDeclaration(
        name="Orientation",
        doc="Orientation of a jigsaw block.",
        variants=(
            "DownEast",
            "DownNorth",
            "DownSouth",
            "DownWest",
            "EastUp",
            "NorthUp",
            "SouthUp",
            "UpEast",
            "UpNorth",
            "UpSouth",
            "UpWest",
            "WestUp",
        ),
    ),
    FamilyDeclaration(
        name="Instrument",
        doc="A note block instrument.",
        variants=(
            "Banjo",
            "Basedrum",
            "Bass",
            "Bell",
            "Bit",
            "Chime",
            "CowBell",
            "Didgeridoo",
            "Flute",
            "Guitar",
            "Harp",
            "Hat",
            "IronXylophone",
            "Pling",
            "Snare",
            "Xylophone",
        ),
    ),
    FamilyDeclaration(
        name="SlabType",
        doc="Type of a slab block.",
        variants=("Bottom", "Top", "Double"),
    ),
    FamilyDeclaration(
        name="PistonType",
        doc="Type of a moving piston or piston head.",
        variants=("Normal", "Sticky"),
    ),
    FamilyDeclaration(
        name="RailShape",
        doc="Shape of a rail block.",
        variants=(
            "EastWest",
            "NorthEast",
            "NorthSouth",
            "NorthWest",
            "SouthEast",
            "SouthWest",
            "AscendingEast",
            "AscendingNorth",
            "AscendingSouth",
            "AscendingWest",
        ),
    ),
    FamilyDeclaration(
        name="ComparatorMode",
        doc="Mode of a redstone comparator.",
        variants=("Compare", "Subtract"),
    ),
    FamilyDeclaration(
        name="RedstoneConnection",
        doc="How a redstone dust connects to a given side.",
        variants=("None", "Side", "Up"),
    ),
    FamilyDeclaration(
        name="StairShape",
        doc="Shape of a stairs block.",
        variants=("InnerLeft", "InnerRight", "OuterLeft", "OuterRight", "Straight"),
    ),
    FamilyDeclaration(
        name="StructureBlockMode",
        doc="Mode of a structure block.",
        variants=("Corner", "Data", "Load", "Save"),
    ),
    FamilyDeclaration(
        name="WallConnection",
        doc="How a wall connects to a given direction.",
        variants=("None", "Low", "Tall"),
    ),
)

REGISTRY = FamilyRegistry(FAMILIES, module=__name__)

BlockFace = REGISTRY["BlockFace"]
BambooLeaves = REGISTRY["BambooLeaves"]
BedPart = REGISTRY["BedPart"]
BellAttachment = REGISTRY["BellAttachment"]
Axis = REGISTRY["Axis"]
AttachedFace = REGISTRY["AttachedFace"]
ChestType = REGISTRY["ChestType"]
BlockHalf = REGISTRY["BlockHalf"]
StairHalf = REGISTRY["StairHalf"]
DoorHinge = REGISTRY["DoorHinge"]
Orientation = REGISTRY["Orientation"]
Instrument = REGISTRY["Instrument"]
SlabType = REGISTRY["SlabType"]
PistonType = REGISTRY["PistonType"]
RailShape = REGISTRY["RailShape"]
ComparatorMode = REGISTRY["ComparatorMode"]
RedstoneConnection = REGISTRY["RedstoneConnection"]
StairShape = REGISTRY["StairShape"]
StructureBlockMode = REGISTRY["StructureBlockMode"]
WallConnection = REGISTRY["WallConnection"]

__all__ = ["FAMILIES", "REGISTRY"] + REGISTRY.names()
