"""
text_match.py - Text Transform Tools

Provides the name and template rewriting used by the batch transforms
"""

from .models_fs import TransformError

TEMPLATE_EXT_TOKEN = "REPLACE_EXT"
TEMPLATE_CLASS_TOKEN = "REPLACE_CLS"
TEMPLATE_CTOR_TOKEN = "REPLACE_CTOR"

AFFIRMATIVE_ANSWERS = ("y", "yes")


def normalize_extension(extension: str) -> str:
    """
    Normalize an extension typed by the user

    Args:
        extension: Extension with or without leading dot (e.g., ".png" or "png")

    Returns:
        Extension without leading dot
    """
    return extension.strip().lstrip(".")


def extension_marker(extension: str) -> str:
    """Return the ".ext" marker searched for in file names"""
    return "." + normalize_extension(extension)


def is_affirmative(answer: str) -> bool:
    """Whether a confirmation answer means yes"""
    return answer.strip().lower() in AFFIRMATIVE_ANSWERS


def remove_chars(name: str, offset: int, length: int) -> str:
    """
    Delete a character range from a name

    Args:
        name: Original name
        offset: Zero-based start index
        length: Number of characters to delete

    Returns:
        Name without the range
    """
    if offset < 0 or length < 0:
        raise TransformError("Offset and length cannot be negative")
    if offset + length > len(name):
        raise TransformError(
            f"Cannot remove {length} characters at offset {offset} from '{name}' ({len(name)} characters)"
        )
    return name[:offset] + name[offset + length:]


def remove_prefix_span(name: str, target: str, extension: str) -> str:
    """
    Delete everything from the first occurrence of target up to the extension marker

    Args:
        name: Original name
        target: String that starts the span
        extension: Extension whose marker ends the span

    Returns:
        Name without the span
    """
    marker = extension_marker(extension)
    end = name.rfind(marker)
    if end < 0:
        raise TransformError(f"Extension '{marker}' not found in '{name}'")

    start = name.find(target, 0, end)
    if not target or start < 0:
        raise TransformError(f"String '{target}' not found in '{name}'")

    return name[:start] + name[end:]


def replace_extension(name: str, old_extension: str, new_extension: str) -> str:
    """
    Replace the old extension marker of a name with a new one

    Args:
        name: Original name
        old_extension: Extension to replace
        new_extension: Replacement extension

    Returns:
        Renamed name
    """
    old_marker = extension_marker(old_extension)
    index = name.rfind(old_marker)
    if index < 0:
        raise TransformError(f"Extension '{old_marker}' not found in '{name}'")
    return name[:index] + extension_marker(new_extension) + name[index + len(old_marker):]


def strip_extension(name: str, extension: str) -> str:
    """Return the base name in front of the extension marker"""
    marker = extension_marker(extension)
    index = name.rfind(marker)
    if index < 0:
        raise TransformError(f"Extension '{marker}' not found in '{name}'")
    return name[:index]


def render_template(text: str, base_name: str, asset_extension: str) -> str:
    """
    Fill the placeholder tokens of a template

    Args:
        text: Template body
        base_name: Asset name without extension
        asset_extension: Extension of the asset

    Returns:
        Rendered body
    """
    if TEMPLATE_EXT_TOKEN in text:
        text = text.replace(TEMPLATE_EXT_TOKEN, base_name + extension_marker(asset_extension))
    if TEMPLATE_CLASS_TOKEN in text:
        text = text.replace(TEMPLATE_CLASS_TOKEN, base_name)
    if TEMPLATE_CTOR_TOKEN in text:
        text = text.replace(TEMPLATE_CTOR_TOKEN, base_name)
    return text
