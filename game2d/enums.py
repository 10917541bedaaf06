"""Enumerations shared across the game: gameplay, interface, audio and world settings."""

from enum import IntEnum, auto


class _Ordinal(IntEnum):
    """Integer enum whose ``auto()`` values continue from the previous member, starting at 0."""

    @staticmethod
    def _generate_next_value_(name, start, count, last_values):
        return last_values[-1] + 1 if last_values else 0


class Action(_Ordinal):
    NONE = 0
    INCREMENT = auto()
    DECREMENT = auto()
    COMPLETED = auto()
    CANCEL = auto()
    VICTORY = auto()
    DEFEAT = auto()
    LOCKED = auto()
    UNLOCKED = auto()


class Alignment(_Ordinal):
    MALIGNANT = 0
    CHAOTIC = 1
    HERETIC = 2
    NEUTRAL = 3
    LOYAL = 4
    HONORED = 5


class Anchor(_Ordinal):
    """Placement of an element relative to its container."""

    NONE = auto()
    TOP_LEFT = auto()
    TOP_RIGHT = auto()
    TOP_CENTER = auto()
    LEFT = auto()
    CENTER = auto()
    RIGHT = auto()
    BOTTOM_CENTER = auto()
    BOTTOM_LEFT = auto()
    BOTTOM_RIGHT = auto()


class Attribute(IntEnum):
    """Character attributes: conditions (negative), primary (0-4) and secondary (5+)."""

    POISONED = -1
    BURNING = -2
    CURSED = -3
    FROZEN = -4
    PETRIFIED = -5
    STUNNED = -6
    PARALYZED = -7
    BLIND = -8
    CONFUSED = -9
    BLEEDING = -10
    ROT = -11
    TOXIC = -12
    ASLEEP = -13
    DRENCHED = -14
    BLIGHT = -15
    LULLED = -16

    CONSTITUTION = 0
    DEXTERITY = 1
    INTELLIGENCE = 2
    STRENGTH = 3
    EXPERIENCE = 4

    BLOCK = 5
    CRIT_RATE = 6
    CRIT_HIT = 7
    DEFENSE = 8
    DODGE = 9
    ENERGY = 10
    HEALTH = 11
    RESISTANCE = 12


class Biome(_Ordinal):
    BOREAL_FOREST = auto()
    DARK_FOREST = auto()
    DESERT = auto()
    FOREST = auto()
    GRASS_LAND = auto()
    HIGHLAND = auto()
    MOUNTAIN = auto()
    SAVANNA = auto()
    SNOW = auto()
    SWAMP = auto()
    TROPICAL_FOREST = auto()
    TUNDRA = auto()


class Body(_Ordinal):
    NPC = auto()
    STATIC = auto()
    PLAYER = auto()
    ENEMY = auto()


class Build(_Ordinal):
    ALIGNMENT = auto()
    EQUIPMENT = auto()
    PROFESSION = auto()
    RACE = auto()


class Building(_Ordinal):
    STONE_ROAD = auto()


class Codex(_Ordinal):
    ALIGNMENT = auto()
    PROFESSION = auto()
    STATUS = auto()
    RACE = auto()

    HEAD = auto()
    CHEST = auto()
    BOOT = auto()
    RING = auto()
    CLOAK = auto()
    NECKLACE = auto()
    WEAPONS = auto()
    KEYS = auto()
    POTIONS = auto()
    MATERIALS = auto()
    RUNES = auto()
    GEMS = auto()


class Color(_Ordinal):
    BLACK = auto()
    CORN_FLOWER_BLUE = auto()
    GOLD_ROD = auto()
    TOMATE = auto()
    TRANSPARENT = auto()
    WHITE = auto()
    DARK_SEA_GREEN = auto()
    GRAY = auto()

    LIGHT = auto()
    OPAQUE = auto()
    REGULAR = auto()

    PRIMARY = auto()


class Consumable(_Ordinal):
    HP = 0
    MP = 1
    ELIXIR = 2


class Entity(_Ordinal):
    TARGET = auto()
    PLAYER = auto()


class Equipment(_Ordinal):
    HEAD = 0
    CHEST = 1
    LEGS = 2
    LEFT_HAND = 3
    RIGHT_HAND = 4
    LEFT_RING = 5
    RIGHT_RING = 6
    NECKLACE = 7
    CLOAK = 8


class Event(_Ordinal):
    """Kinds of events: bindings first, then window events."""

    CAMERA = auto()
    EXIT_GAME = auto()
    LOGGER = auto()
    NODE = auto()
    NOTIFICATION = auto()
    ROUTE = auto()
    SAVE_GAME = auto()
    SCHEMA_CHANGED = auto()
    NODE_SELECTED = auto()
    SOUND = auto()
    ANIMATION = auto()

    WINDOW_RESIZED = auto()
    TEXT_ENTERED = auto()
    KEY_PRESSED = auto()
    KEY_RELEASED = auto()
    MOUSE_MOVED = auto()
    MOUSE_WHEEL_SCROLLED = auto()
    MOUSE_BUTTON_PRESSED = auto()
    MOUSE_BUTTON_RELEASED = auto()


class Folder(_Ordinal):
    LOGS = auto()
    WORLDS = auto()
    OPTIONS = auto()
    REGIONS = auto()
    CHARACTERS = auto()


class Font(_Ordinal):
    OPEN_SANS_REGULAR = auto()
    OPEN_SANS_SEMIBOLD = auto()


class FontStyle(_Ordinal):
    REGULAR = auto()
    BOLD = auto()
    ITALIC = auto()
    UNDERLINED = auto()
    STRIKE_THROUGH = auto()


class Frame(IntEnum):
    """Frame-rate limits."""

    MINIMUM = 30
    COMMON = 60
    MAXIMUM = 75


class Graphic(_Ordinal):
    ANCHOR_LEFT = auto()
    ANCHOR_RIGHT = auto()
    ANCHOR_TOP_LEFT = auto()
    ANCHOR_TOP_RIGHT = auto()
    ANCHOR_TOP_CENTER = auto()
    ANCHOR_BOTTOM_LEFT = auto()
    ANCHOR_BOTTOM_RIGHT = auto()
    ANCHOR_BOTTOM_CENTER = auto()

    LOOT_NODE = auto()
    SELECTED_NODE = auto()
    PANEL_DEFAULT = auto()

    BUTTON_DEFAULT = auto()
    BUTTON_DEFAULT_HOVER = auto()
    BUTTON_DEFAULT_PRESSED = auto()

    ENTRY_DEFAULT = auto()
    ENTRY_DEFAULT_HOVER = auto()
    ENTRY_DEFAULT_PRESSED = auto()


class Hability(_Ordinal):
    """Available abilities; each is animated with five frames."""

    HIT_PUNCH = auto()
    FIRE_CAST = auto()
    MAGIC_EXPLOSION = auto()


class HabilityFrame(_Ordinal):
    """Animation frames, five per ability, numbered 1 to 5."""

    HIT_PUNCH_1 = auto()
    HIT_PUNCH_2 = auto()
    HIT_PUNCH_3 = auto()
    HIT_PUNCH_4 = auto()
    HIT_PUNCH_5 = auto()
    FIRE_CAST_1 = auto()
    FIRE_CAST_2 = auto()
    FIRE_CAST_3 = auto()
    FIRE_CAST_4 = auto()
    FIRE_CAST_5 = auto()
    MAGIC_EXPLOSION_1 = auto()
    MAGIC_EXPLOSION_2 = auto()
    MAGIC_EXPLOSION_3 = auto()
    MAGIC_EXPLOSION_4 = auto()
    MAGIC_EXPLOSION_5 = auto()


class Hand(_Ordinal):
    ONE_HAND = auto()
    TWO_HAND = auto()


class HudRoute(_Ordinal):
    SETTING = auto()
    STATISTIC = auto()
    WORLD_MAP = auto()


class Icon(_Ordinal):
    INCREMENT = auto()
    DECREMENT = auto()
    LOCKED = auto()
    UNLOCKED = auto()
    # navigation menu
    STATS = auto()
    SKILL = auto()
    PROFICIENCY = auto()
    CODEX = auto()
    SETTING = auto()
    BANK = auto()
    INVENTORY = auto()
    EQUIPMENT = auto()
    FORGE = auto()
    ORNAMENT = auto()
    WORLD = auto()
    QUEST = auto()
    DUNGEON = auto()
    TOWER = auto()
    TRAINING = auto()

    RUNE = auto()
    STACK = auto()
    HAND = auto()
    COIN = auto()

    CONSUMABLE = auto()
    WEAPON = auto()
    MATERIAL = auto()
    TOKEN = auto()
    # equipment slots
    NECKLACE = auto()
    CLOAK = auto()
    HELMET = auto()
    ARMOR = auto()
    BOOTS = auto()
    RING = auto()
    LEFT_HAND = auto()
    RIGHT_HAND = auto()
    # character build
    ALIGNMENT = auto()
    PROFESSION = auto()
    RACE = auto()


class Item(_Ordinal):
    # materials
    BAT_WING = auto()
    BOTTLE = auto()
    COAL = auto()
    COTTON = auto()
    COTTON_YARN = auto()
    COTTON_CLOTH = auto()
    COPPER_ORE = auto()
    COPPER_INGOT = auto()
    CLAW = auto()
    DUST = auto()
    EAR = auto()
    FANG = auto()
    FEATHER = auto()
    HORN = auto()
    IRON_ORE = auto()
    IRON_INGOT = auto()
    LEATHER = auto()
    LOG = auto()
    PELT = auto()
    SAND = auto()
    SCALE = auto()
    STONE = auto()
    WEB = auto()
    WEB_YARN = auto()
    # jewels
    AMETHYST = auto()
    AMBER = auto()
    DIAMOND = auto()
    EMERALD = auto()
    OPAL = auto()
    RUBI = auto()
    SAPHIR = auto()
    TOPAZ = auto()
    # runes
    EIHWAZ = auto()
    GEBO = auto()
    HAGALAZ = auto()
    JERA = auto()
    NAUTHIZ = auto()
    PERDHRO = auto()
    RAIDHO = auto()
    ANSUZ = auto()
    TIWAZ = auto()
    ALGIZ = auto()
    BERKANA = auto()
    DAGAZ = auto()
    INGUZ = auto()
    LAGUZ = auto()
    MANNAZ = auto()
    OTHILA = auto()
    # keys
    DUNGEON_KEY = auto()
    ARENA_SYMBOL = auto()
    # potions
    HEALTH_POTION = auto()
    MANA_POTION = auto()
    ELIXIR = auto()
    # cloth equipment
    MAGE_HAT = auto()
    ROBE = auto()
    SHOES = auto()
    TOP_HAT = auto()
    COAT = auto()
    LIGHT_SHOES = auto()
    LIGHT_CLOAK = auto()
    # leather equipment
    HOOD = auto()
    LEATHER_ARMOR = auto()
    LEATHER_BOOTS = auto()
    LIGHT_HELMET = auto()
    SHOULDER_ARMOR = auto()
    BOOTS = auto()
    LEATHER_CLOAK = auto()
    # metal equipment
    WARRIOR_HELMET = auto()
    WARLORD_ARMOR = auto()
    WARLORD_BOOTS = auto()
    WARLORD_HELMET = auto()
    WARRIOR_ARMOR = auto()
    WARRIOR_BOOTS = auto()
    # left hand
    CASTLE_SHIELD = auto()
    ANKH = auto()
    LYRE = auto()
    FLUTE = auto()
    LUTE = auto()
    CLAWS = auto()
    QUIVER = auto()
    KNIFE = auto()
    ORB = auto()
    SPELLBOOK = auto()
    # right hand
    WAR_AXE = auto()
    SHORT_BOW = auto()
    CROSSBOW = auto()
    ASSASSIN_DAGGER = auto()
    CEREMONIAL_DAGGER = auto()
    GLOVES = auto()
    HUNTING_SPEAR = auto()
    BRIGHT_SWORD = auto()
    CRYSTAL_WAND = auto()
    LUNAR_STAFF = auto()
    ORB_WAND = auto()
    SHARP_AXE = auto()
    WAR_TRIDENT = auto()
    MIDNIGHT_SCYTHE = auto()
    WAR_HAMMER = auto()
    SHORT_MACE = auto()
    CLUB = auto()
    # rings
    NEUTRAL_RING = auto()
    POWER_RING = auto()
    SKULL_RING = auto()
    NECRO_RING = auto()
    # necklaces
    FEATHER_NECKLACE = auto()
    FANG_NECKLACE = auto()
    CLAW_NECKLACE = auto()
    POWER_NECKLACE = auto()


class Language(_Ordinal):
    EN_USD = auto()
    PT_BR = auto()


class LogLevel(_Ordinal):
    NONE = auto()
    ERROR = auto()
    INFO = auto()
    SUCCESS = auto()
    WARNING = auto()


class LoggerLevel(_Ordinal):
    NONE = auto()
    DIALOG = auto()
    GENERAL = auto()


class Mouse(_Ordinal):
    """Mouse buttons and wheel directions."""

    NONE = -99
    SCROLL_DOWN = -1
    LEFT = 0
    SCROLL_UP = 1
    RIGHT = auto()
    MIDDLE = auto()
    X_BUTTON_1 = auto()
    X_BUTTON_2 = auto()
    BUTTON_COUNT = auto()


class Opacity(IntEnum):
    """Alpha channel values."""

    OPAQUE = 64
    REGULAR = 128
    LIGHT = 255
    TRANSPARENT = 0


class Place(_Ordinal):
    BANK = auto()
    FORGE = auto()
    ARENA = auto()
    DUNGEON = auto()
    TOWER = auto()


class Primary(_Ordinal):
    CONSTITUTION = 0
    DEXTERITY = 1
    INTELLIGENCE = 2
    STRENGTH = 3


class Profession(_Ordinal):
    BARBARIAN = 0
    GUARDIAN = 1
    PALADIN = 2
    WARRIOR = 3

    BATTLE_MAGE = 4
    CLERIC = 5
    DRUID = 6
    PYROMANCER = 7

    BARD = 8
    RANGER = 9
    ROGUE = 10
    MONK = 11


class Proficiency(_Ordinal):
    AXE = auto()
    BOW = auto()
    DAGGER = auto()
    HAMMER = auto()
    HAND = auto()
    INSTRUMENT = auto()
    MACE = auto()
    SHIELD = auto()
    SPEAR = auto()
    STAFF = auto()
    SWORD = auto()
    TOTEM = auto()
    WAND = auto()


class Quality(_Ordinal):
    COMMON = 0
    HIGHER = 1
    LEGENDARY = 2
    MYTHICAL = 3
    PERFECT = 4


class Race(_Ordinal):
    # playable
    DWARF = 0
    DRAGONBORN = 1
    ELF = 2
    GNOME = 3
    GOBLIN = 4
    HUMAN = 5
    LIZARDFOLK = 6
    ORC = 7
    KOBOLD = 8
    KHAJIIT = 9
    LICH = 10
    PIXIE = 11

    SCARECROW = auto()
    # goblins
    GOBLIN_PYROMANCER = auto()
    GOBLIN_SHAMAN = auto()
    GOBLIN_CLERIC = auto()
    GOBLIN_BATTLE_MAGE = auto()
    # bats
    BAT = auto()
    VAMPIRE_BAT = auto()
    # slimes
    SLIME = auto()
    RED_SLIME = auto()
    BLUE_SLIME = auto()
    DARK_SLIME = auto()
    BROWN_SLIME = auto()
    # spiders
    SPIDER = auto()
    TARANTULA = auto()
    FIRE_SPIDER = auto()
    DARK_SPIDER = auto()
    ENCHANT_SPIDER = auto()


class Skill(IntEnum):
    """Gathering skills (1-10) and crafting skills (11-20)."""

    WOODCUTTING = 1
    MINING = 2
    FISHING = 3
    FORAGING = 4
    FARMING = 5

    ALCHEMY = 11
    BLACKSMITHING = 12
    BONE_CARVING = 13
    COOKING = 14
    CARPENTRY = 15
    JEWELCRAFTING = 16
    LEATHERWORKING = 17
    METALSMITHING = 18
    TAILORING = 19


class Sound(_Ordinal):
    # ambient
    RAIN = auto()
    # interface
    BUTTON_CLICKED = auto()
    # combat
    DAMAGE = auto()
    MISS = auto()
    PARRY = auto()
    # others
    DRINK = auto()
    # steps
    STEP_DIRT_A = auto()
    STEP_DIRT_B = auto()
    STEP_DIRT_C = auto()
    STEP_DIRT_D = auto()
    STEP_ICE_A = auto()
    STEP_ICE_B = auto()
    STEP_ICE_C = auto()
    STEP_ICE_D = auto()
    STEP_LEAVES_A = auto()
    STEP_LEAVES_B = auto()
    STEP_MUD_A = auto()
    STEP_MUD_B = auto()
    STEP_MUD_C = auto()
    STEP_MUD_D = auto()
    STEP_SAND_A = auto()
    STEP_SAND_B = auto()
    STEP_SAND_C = auto()
    STEP_SAND_D = auto()
    STEP_SNOW_A = auto()
    STEP_SNOW_B = auto()
    STEP_SNOW_C = auto()
    STEP_SNOW_D = auto()


class Terrain(_Ordinal):
    """Terrain tiles, four variants (A to D) per biome, in biome order."""

    BOREAL_FOREST_A = auto()
    BOREAL_FOREST_B = auto()
    BOREAL_FOREST_C = auto()
    BOREAL_FOREST_D = auto()
    DARK_FOREST_A = auto()
    DARK_FOREST_B = auto()
    DARK_FOREST_C = auto()
    DARK_FOREST_D = auto()
    DESERT_A = auto()
    DESERT_B = auto()
    DESERT_C = auto()
    DESERT_D = auto()
    FOREST_A = auto()
    FOREST_B = auto()
    FOREST_C = auto()
    FOREST_D = auto()
    GRASS_LAND_A = auto()
    GRASS_LAND_B = auto()
    GRASS_LAND_C = auto()
    GRASS_LAND_D = auto()
    HIGHLAND_A = auto()
    HIGHLAND_B = auto()
    HIGHLAND_C = auto()
    HIGHLAND_D = auto()
    MOUNTAIN_A = auto()
    MOUNTAIN_B = auto()
    MOUNTAIN_C = auto()
    MOUNTAIN_D = auto()
    SAVANNA_A = auto()
    SAVANNA_B = auto()
    SAVANNA_C = auto()
    SAVANNA_D = auto()
    SNOW_A = auto()
    SNOW_B = auto()
    SNOW_C = auto()
    SNOW_D = auto()
    SWAMP_A = auto()
    SWAMP_B = auto()
    SWAMP_C = auto()
    SWAMP_D = auto()
    TROPICAL_FOREST_A = auto()
    TROPICAL_FOREST_B = auto()
    TROPICAL_FOREST_C = auto()
    TROPICAL_FOREST_D = auto()
    TUNDRA_A = auto()
    TUNDRA_B = auto()
    TUNDRA_C = auto()
    TUNDRA_D = auto()


class ViewRoute(_Ordinal):
    MAIN = auto()
    WORLD = auto()
    CHARACTER = auto()


class MusicVolume(IntEnum):
    """Music volume steps, in percent."""

    S0 = 0
    S1 = 25
    S2 = 50
    S3 = 75
    S4 = 100


class SoundVolume(IntEnum):
    """Sound-effect volume steps, in percent."""

    S0 = 0
    S1 = 15
    S2 = 30
    S3 = 45
    S4 = 60
    S5 = 75
    S6 = 90
    S7 = 100


class WindowMode(_Ordinal):
    WINDOW = auto()
    FULLSCREEN = auto()


class WindowResolution(_Ordinal):
    R_800X600 = auto()
    R_1024X768 = auto()
    R_1280X720 = auto()
    R_1980X1280 = auto()


class WorldSize(IntEnum):
    """World side length, in regions."""

    TINY = 12
    SMALL = 24
    DEFAULT = 32
    LARGE = 48
    VERY_LARGE = 64