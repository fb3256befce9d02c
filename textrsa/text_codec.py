from typing import Iterable, List


def TextToChars(text: str) -> List[str]:
    return list(text)


def CharsToText(chars: Iterable[str]) -> str:
    return "".join(chars)


def CharsToUnits(chars: Iterable[str]) -> List[int]:
    return [ord(ch) for ch in chars]


def UnitsToChars(units: Iterable[int]) -> List[str]:
    chars = []
    for unit in units:
        if not 0 <= unit <= 0x10FFFF:
            raise ValueError(f"Unit {unit} is not a valid character code.")
        chars.append(chr(unit))
    return chars


def TextToUnits(text: str) -> List[int]:
    return CharsToUnits(TextToChars(text))


def UnitsToText(units: Iterable[int]) -> str:
    return CharsToText(UnitsToChars(units))


def UnitsToBinary(units: Iterable[int]) -> List[str]:
    return [format(unit, "b") for unit in units]
