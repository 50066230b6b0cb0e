from typing import Dict, Iterable, Set, Tuple

_BUILTIN_WORDS: Dict[int, Tuple[str, ...]] = {
    3: (
        "ACE", "ANT", "ARM", "BAT", "BEE", "BOX", "CAT", "COW", "CUP", "DOG",
        "EAR", "EGG", "ELF", "FAN", "FOX", "GEM", "HAT", "ICE", "INK", "JAR",
        "KEY", "LOG", "MAP", "NET", "OAK", "OWL", "PEN", "PIG", "RAT", "SUN",
        "TOE", "URN", "VAN", "WEB", "YAK", "ZIP",
    ),
    4: (
        "BEAR", "BELL", "BOAT", "CAKE", "COIN", "DEER", "DOOR", "DUCK", "FISH", "FROG",
        "GOAT", "HAND", "HARP", "KITE", "LAMP", "LION", "MOON", "NEST", "NOTE", "PEAR",
        "RAIN", "ROSE", "SEAL", "SHIP", "SNOW", "STAR", "TENT", "TREE", "WOLF", "YARN",
    ),
    5: (
        "APPLE", "BEACH", "BREAD", "CHAIR", "CLOUD", "CROWN", "DRESS", "EAGLE", "FLAME", "GHOST",
        "GRAPE", "HORSE", "HOUSE", "KNIFE", "LEMON", "MOUSE", "NURSE", "OCEAN", "PIANO", "PLANT",
        "QUEEN", "RIVER", "SHEEP", "SNAKE", "STONE", "TABLE", "TIGER", "TRAIN", "WHALE", "ZEBRA",
    ),
    6: (
        "ANCHOR", "BASKET", "BRIDGE", "CANDLE", "CASTLE", "DRAGON", "FOREST", "GARDEN", "GUITAR", "HAMMER",
        "ISLAND", "JACKET", "KITTEN", "LADDER", "MIRROR", "MONKEY", "ORANGE", "PARROT", "PENCIL", "PLANET",
        "RABBIT", "ROCKET", "SILVER", "SPIDER", "TEMPLE", "TURTLE", "VALLEY", "WINDOW", "WIZARD", "YELLOW",
    ),
}


def builtin_word_lists() -> Dict[int, Tuple[str, ...]]:
    return dict(_BUILTIN_WORDS)


def builtin_word_bank() -> Set[str]:
    return {w for words in _BUILTIN_WORDS.values() for w in words}


def word_lists_from_words(words: Iterable[str]) -> Dict[int, Tuple[str, ...]]:
    by_length: Dict[int, Set[str]] = {}
    for w in words:
        w = w.strip().upper()
        if not w.isalpha():
            continue
        by_length.setdefault(len(w), set()).add(w)
    return {length: tuple(sorted(ws)) for length, ws in by_length.items()}
