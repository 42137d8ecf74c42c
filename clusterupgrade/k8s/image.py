"""Container image reference parsing."""

from typing import Union

from ..exceptions import InvalidImageSectionError
from ..model.component import ImageReference, ImageSection

# Characters kubectl jsonpath output may be wrapped in
_WRAPPING_CHARS = "'\"` \t\r\n"


def _clean_output(output: str) -> str:
    cleaned = output.strip(_WRAPPING_CHARS)
    # Several containers print as a space separated list, keep the first one
    tokens = cleaned.split()
    return tokens[0].strip(_WRAPPING_CHARS) if tokens else ""


def parse_image_reference(output: str) -> ImageReference:
    """Split the image printed by kubectl into prefix and tag.

    The split happens on the last colon so a registry port stays in the
    prefix. A reference without a tag (no colon, or a slash after the last
    colon) keeps the whole string as prefix and an empty tag.
    """
    image = _clean_output(output)
    prefix, sep, tag = image.rpartition(":")
    if not sep or "/" in tag:
        return ImageReference(prefix=image, tag="")
    return ImageReference(prefix=prefix, tag=tag)


def parse_component_image(output: str, image_section: Union[ImageSection, str]) -> str:
    """Return the tag or the prefix of the image printed by kubectl.

    Raises:
        InvalidImageSectionError: if ``image_section`` is neither ``imageTag``
            nor ``imagePrefix``.
    """
    try:
        section = ImageSection(image_section)
    except ValueError:
        raise InvalidImageSectionError(str(image_section), ImageSection.values()) from None

    return parse_image_reference(output).section(section)
