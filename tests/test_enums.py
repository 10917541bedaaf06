import pytest

from game2d import enums
from game2d.enums import (
    Action,
    Alignment,
    Anchor,
    Attribute,
    Biome,
    Body,
    Build,
    Building,
    Codex,
    Color,
    Consumable,
    Entity,
    Equipment,
    Event,
    Folder,
    Font,
    FontStyle,
    Frame,
    Graphic,
    Hability,
    HabilityFrame,
    Hand,
    HudRoute,
    Icon,
    Item,
    Language,
    LogLevel,
    LoggerLevel,
    Mouse,
    MusicVolume,
    Opacity,
    Place,
    Primary,
    Profession,
    Proficiency,
    Quality,
    Race,
    Skill,
    Sound,
    SoundVolume,
    Terrain,
    ViewRoute,
    WindowMode,
    WindowResolution,
    WorldSize,
)

SEQUENTIAL = [
    Action, Alignment, Anchor, Biome, Body, Build, Building, Codex, Color,
    Consumable, Entity, Equipment, Event, Folder, Font, FontStyle, Graphic,
    Hability, HabilityFrame, Hand, HudRoute, Icon, Item, Language, LogLevel,
    LoggerLevel, Place, Primary, Profession, Proficiency, Quality, Race, Sound,
    Terrain, ViewRoute, WindowMode, WindowResolution,
]

UNSIGNED = SEQUENTIAL + [Frame, Opacity, Skill, MusicVolume, SoundVolume, WorldSize]
SIGNED = [Attribute, Mouse]


def test_sequential_enums_count_from_zero():
    assert Action(0) is Action.NONE
    assert Anchor(0) is Anchor.NONE
    assert LogLevel(0) is LogLevel.NONE
    assert Equipment(0) is Equipment.HEAD
    assert Item(0) is Item.BAT_WING
    for enum_cls in SEQUENTIAL:
        looked_up = [enum_cls(value) for value in range(len(enum_cls))]
        assert looked_up == list(enum_cls), enum_cls.__name__


def test_unsigned_enums_fit_in_a_byte():
    assert Opacity(255) is Opacity.LIGHT
    assert Frame(75) is Frame.MAXIMUM
    assert WorldSize(64) is max(WorldSize)
    for enum_cls in UNSIGNED:
        for member in enum_cls:
            assert 0 <= enum_cls(member.value) <= 255


def test_signed_enums_fit_in_a_signed_byte():
    assert Mouse(-99) is Mouse.NONE
    assert Attribute(-16) is Attribute.LULLED
    assert Attribute(12) is Attribute.RESISTANCE
    for enum_cls in SIGNED:
        for member in enum_cls:
            assert -128 <= enum_cls(member.value) <= 127


def test_mouse_values():
    assert Mouse(-99) is Mouse.NONE
    assert Mouse(-1) is Mouse.SCROLL_DOWN
    assert Mouse(0) is Mouse.LEFT
    assert Mouse(1) is Mouse.SCROLL_UP
    assert Mouse(2) is Mouse.RIGHT
    assert Mouse(Mouse.X_BUTTON_2.value + 1) is Mouse.BUTTON_COUNT


def test_race_continues_after_playable_races():
    assert Race(11) is Race.PIXIE
    assert Race(12) is Race.SCARECROW
    assert Race(len(Race) - 1) is Race.ENCHANT_SPIDER


def test_attribute_regions():
    looked_up = [Attribute(value) for value in range(-16, 13)]
    assert len(set(looked_up)) == 29
    assert Attribute(-1) is Attribute.POISONED
    assert Attribute(-16) is Attribute.LULLED
    assert Attribute(4) is Attribute.EXPERIENCE
    assert Attribute(12) is Attribute.RESISTANCE


def test_primary_matches_attribute():
    for member in Primary:
        assert Attribute(member.value) is Attribute[member.name]


def test_skill_regions():
    gathering = [Skill(value).name for value in range(1, 6)]
    assert gathering == ["WOODCUTTING", "MINING", "FISHING", "FORAGING", "FARMING"]
    assert Skill(11) is Skill.ALCHEMY
    assert Skill(19) is Skill.TAILORING
    crafting = [s.value for s in Skill if s >= Skill.ALCHEMY]
    assert crafting == list(range(11, 20))


def test_terrain_has_four_variants_per_biome():
    assert len(Terrain) == 4 * len(Biome)
    for biome in Biome:
        for offset, letter in enumerate("ABCD"):
            assert Terrain(biome * 4 + offset).name == f"{biome.name}_{letter}"


def test_hability_frames_have_five_per_ability():
    assert len(HabilityFrame) == 5 * len(Hability)
    for value in range(len(Hability)):
        ability = Hability(value)
        for number in range(1, 6):
            frame = HabilityFrame(ability * 5 + number - 1)
            assert frame is HabilityFrame[f"{ability.name}_{number}"]


def test_opacity_values_and_color_names():
    assert Opacity(64) is Opacity.OPAQUE
    assert Opacity(128) is Opacity.REGULAR
    assert Opacity(255) is Opacity.LIGHT
    assert Opacity(0) is Opacity.TRANSPARENT
    assert [o.name for o in Opacity] == ["OPAQUE", "REGULAR", "LIGHT", "TRANSPARENT"]
    for member in Opacity:
        assert Color[member.name].name == member.name


def test_frame_values():
    assert [Frame(v) for v in (30, 60, 75)] == list(Frame)
    assert Frame(30) is Frame.MINIMUM
    assert Frame(60) is Frame.COMMON
    assert Frame(75) is Frame.MAXIMUM
    assert Frame.MINIMUM < Frame.COMMON < Frame.MAXIMUM


def test_volume_steps():
    assert [MusicVolume(v) for v in (0, 25, 50, 75, 100)] == list(MusicVolume)
    assert [SoundVolume(v) for v in (0, 15, 30, 45, 60, 75, 90, 100)] == list(SoundVolume)
    with pytest.raises(ValueError):
        MusicVolume(10)
    with pytest.raises(ValueError):
        SoundVolume(25)


def test_world_sizes_are_increasing():
    assert [WorldSize(v) for v in (12, 24, 32, 48, 64)] == list(WorldSize)
    assert WorldSize(32) is WorldSize.DEFAULT
    assert WorldSize.DEFAULT == 32


def test_equipment_slots():
    assert Equipment(0) is Equipment.HEAD
    assert Equipment(8) is Equipment.CLOAK
    assert Equipment(5) is Equipment["LEFT_RING"]


def test_none_members_are_zero():
    assert Action(0) is Action.NONE
    assert Anchor(0) is Anchor.NONE
    assert LogLevel(0) is LogLevel.NONE
    assert LoggerLevel(0) is LoggerLevel.NONE


def test_unknown_value_raises():
    with pytest.raises(ValueError):
        Action(255)
    with pytest.raises(ValueError):
        Mouse(-50)
    with pytest.raises(ValueError):
        Skill(6)


def test_unknown_name_raises():
    assert Item(0) is Item["BAT_WING"]
    with pytest.raises(KeyError):
        Item["EXCALIBUR"]
    with pytest.raises(ValueError):
        Item(len(Item))


def test_lookup_round_trip():
    assert Race(0) is Race["DWARF"]
    assert Mouse(-1) is Mouse["SCROLL_DOWN"]
    for enum_cls in UNSIGNED + SIGNED:
        for member in enum_cls:
            assert enum_cls(member.value) is member
            assert enum_cls[member.name] is member


def test_item_ordering_follows_categories():
    assert Item(0) is Item.BAT_WING
    assert Item.WEB_YARN < Item.AMETHYST < Item.EIHWAZ < Item.DUNGEON_KEY
    assert Item(len(Item) - 1) is Item.POWER_NECKLACE


def test_module_exposes_all_planned_enums():
    assert Event(0) == 0
    assert Icon(0) == 0
    assert WindowResolution(0) == 0
    assert SoundVolume(0) == 0
    for name in ["Event", "Icon", "WindowResolution", "SoundVolume"]:
        enum_cls = getattr(enums, name)
        assert issubclass(enum_cls, int)
        assert enum_cls(0) == 0