"""
gate.py - Value Capture

A wizard step takes two round trips: the first prints the prompt and puts
the session into capture mode, the second receives the typed line as the
step's value and moves to the next step.
"""

from typing import Optional

from ..core import Session


def capture(session: Session, raw_input: str, prompt_text: str, success_message: str) -> Optional[str]:
    """
    Run one phase of a wizard step

    Args:
        session: Current session
        raw_input: Line typed by the user (ignored when prompting)
        prompt_text: Shown when the step starts
        success_message: Shown once the value is captured, "{value}" is filled in

    Returns:
        The captured value, or None when the prompt was just shown
    """
    if not session.awaiting_value:
        print(prompt_text)
        session.awaiting_value = True
        return None

    session.awaiting_value = False
    session.step += 1
    print(success_message.replace("{value}", raw_input))
    return raw_input
