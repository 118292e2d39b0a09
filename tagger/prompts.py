"""Prompt templates for tag suggestion."""

from tagger.config import MAX_TAGS

__all__ = ["make_tag_prompt"]


def make_tag_prompt(name: str, description: str, tag_count: int = MAX_TAGS) -> str:
    """Build the prompt asking the model for a JSON array of keyword tags.

    The model is told to output only the array, but the parser does not
    rely on it complying.

    Args:
        name: Product name
        description: Product description
        tag_count: Number of tags to ask for

    Returns:
        Prompt string
    """
    return (
        f"Based on the product name '{name}' and description '{description}', "
        f"generate a JSON array of {tag_count} relevant and concise keyword tags. "
        'Example format: ["tag1", "tag2", "tag3"]. '
        "Output only the JSON array."
    )
