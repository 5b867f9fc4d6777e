import logging
from collections import Counter
from typing import Dict, List, Mapping, Optional

import yaml

logger = logging.getLogger(__name__)

MAIN_HEADER = "#main"
SECTION_ENDS = ("#extra", "!side")


def parse_ydk_main_deck(ydk_text: str) -> Dict[str, int]:
    """
    Parse the main deck of a YDK file.

    Lines after ``#main`` are card passcodes, one copy per line, up to the
    ``#extra`` or ``!side`` header. Comment lines starting with ``#`` are skipped.

    Args:
        ydk_text: Content of a .ydk file.

    Returns:
        Mapping of passcode to number of copies, in first-seen order.

    Raises:
        ValueError: If the text has no #main section.
    """
    lines = [line.strip() for line in ydk_text.splitlines() if line.strip()]
    try:
        main_index = lines.index(MAIN_HEADER) + 1
    except ValueError:
        raise ValueError("No '#main' section found in YDK content") from None

    passcodes: List[str] = []
    for line in lines[main_index:]:
        if line.startswith(SECTION_ENDS):
            break
        if line.startswith("#"):
            continue
        if not line.isdigit():
            logger.warning(f"Skipping non-numeric line in YDK main deck: {line!r}")
            continue
        # Passcodes are sometimes written with leading zeros
        passcodes.append(str(int(line)))
    return dict(Counter(passcodes))


def convert_ydk_to_yaml(
    ydk_text: str, card_names: Optional[Mapping[str, str]] = None
) -> str:
    """
    Convert a YDK deck list to a simulation input YAML document.

    Args:
        ydk_text: Content of a .ydk file.
        card_names: Optional passcode to card name lookup. Passcodes without a
            name are kept as the card name.

    Returns:
        YAML text with a ``deck`` mapping and an empty ``conditions`` list.
    """
    counts = parse_ydk_main_deck(ydk_text)
    card_names = card_names or {}
    deck: Dict[str, Dict[str, object]] = {}
    for passcode, qty in counts.items():
        name = card_names.get(passcode, passcode)
        if card_names and passcode not in card_names:
            logger.warning(f"No card name known for passcode {passcode}")
        if name in deck:
            deck[name]["qty"] += qty
        else:
            deck[name] = {"qty": qty, "tags": []}
    logger.info(f"Converted YDK main deck with {sum(counts.values())} cards")
    return yaml.safe_dump(
        {"deck": deck, "conditions": []},
        default_flow_style=False,
        sort_keys=False,
        allow_unicode=True,
    )
