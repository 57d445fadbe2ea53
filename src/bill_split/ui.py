"""Interactive UI components for entering participants."""

import logging

from prompt_toolkit import PromptSession

logger = logging.getLogger(__name__)

UNDO_COMMAND = "/undo"


def collect_names_interactive(prompt_label: str = "Name") -> list[str] | None:
    """
    Prompt for participant names one at a time.

    An empty line finishes the list, "/undo" removes the last name entered.

    Args:
        prompt_label: Label shown before each prompt

    Returns:
        Names in the order entered, or None if the user cancelled (Ctrl+C)
    """
    print("   Press Enter on an empty line when done, /undo to remove the last name\n")

    session: PromptSession[str] = PromptSession()
    names: list[str] = []

    try:
        while True:
            result = session.prompt(f"{prompt_label} [{len(names) + 1}]: ").strip()

            if not result:
                break

            if result == UNDO_COMMAND:
                if names:
                    removed = names.pop()
                    print(f"   Removed {removed}")
                continue

            names.append(result)

    except KeyboardInterrupt:
        print("\n⏭️  Cancelled")
        return None
    except EOFError:
        pass

    logger.debug(f"Collected {len(names)} names")
    return names
