"""Honorific and title prefixes stripped from name lines.

Thai titles are listed alongside their abbreviations. A few entries are
common misspellings seen in pasted lead lists (a Latin ``o`` typed for
``อ``, or an abbreviation missing its final period) and are kept on purpose.
"""

from __future__ import annotations

from typing import Tuple

NAME_PREFIXES: Tuple[str, ...] = (
    # Royal and noble
    "หม่อมเจ้า", "ม.จ.", "หม่อมราชวงศ์", "ม.ร.ว.", "หม่อมหลวง", "ม.ล.", "ท่านผู้หญิง", "คุณหญิง",
    # Academic
    "ศาสตราจารย์", "ศ.", "รองศาสตราจารย์", "รศ.", "ผู้ช่วยศาสตราจารย์", "ผศ.", "ด็อกเตอร์", "ดร.",
    # Medical and professional
    "นายแพทย์", "นพ.", "แพทย์หญิง", "พญ.", "ทันตแพทย์", "ทพ.", "ทันตแพทย์หญิง", "ทพญ.",
    "สัตวแพทย์", "สพ.", "สัตวแพทย์หญิง", "สพญ.", "เภสัชกร", "ภก.", "เภสัชกรหญิง", "ภกญ.",
    # Military
    "พลเอก", "พล.อ.", "พลเรือเอก", "พล.ร.อ.", "พลอากาศเอก", "พล.อ.อ.",
    "พลโท", "พล.ท.", "พลเรือโท", "พล.ร.ท.", "พลอากาศโท", "พล.o.ท.",
    "พลตรี", "พล.ต.", "พลเรือตรี", "พล.ร.ต.", "พลอากาศตรี", "พล.o.ต.",
    "พันเอก", "พ.อ.", "พันโท", "พ.ท.", "พันตรี", "พ.ต.",
    "ร้อยเอก", "ร.อ.", "ร้อยโท", "ร.ท.", "ร้อยตรี", "ร.ต.",
    # Police
    "พลตำรวจเอก", "พล.ต.o.", "พล.ต.อ.", "พลตำรวจโท", "พล.ต.ท.", "พลตำรวจตรี", "พล.ต.ต.",
    "พันตำรวจเอก", "พ.ต.o.", "พ.ต.อ.", "พันตำรวจโท", "พ.ต.ท.", "พันตำรวจตรี", "พ.ต.ต.",
    "ร้อยตำรวจเอก", "ร.ต.o.", "ร.ต.อ.", "ร้อยตำรวจโท", "ร.ต.ท.", "ร้อยตำรวจตรี", "ร.ต.ต.",
    "นายดาบตำรวจ", "ด.ต.", "ว่าที่ร้อยตรี", "ว่าที่ ร.ต.", "ว่าที่",
    # Common
    "นาย", "นางสาว", "นาง", "น.ส.", "นส.", "เด็กชาย", "ด.ช.", "ดช.", "เด็กหญิง", "ด.ญ.", "ดญ.", "คุณ", "ท่าน",
    # English
    "Mr.", "Mr", "Mrs.", "Mrs", "Miss", "Ms.", "Ms", "Dr.", "Dr",
    "MR", "MRS", "MISS", "MS", "DR",
    # Misspellings
    "น.ส ", "ด.ช ", "ด.ญ ", "พ.ต.ท ", "พ.ต.o ", "พ.ต.อ ",
)


def sort_longest_first(prefixes: Tuple[str, ...]) -> Tuple[str, ...]:
    """Order prefixes so longer titles are tried before the ones they contain.

    The sort is stable: prefixes of equal length keep their listed order.
    """
    return tuple(sorted(prefixes, key=len, reverse=True))


SORTED_NAME_PREFIXES: Tuple[str, ...] = sort_longest_first(NAME_PREFIXES)
