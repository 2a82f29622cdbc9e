"""Page content: fragment model, Markdown parsing, rendering and the registry."""

from .links import InternalLinkResolver
from .models import (
    BulletList,
    Code,
    CodeBlock,
    ContentFragment,
    Emphasis,
    Heading,
    Link,
    Paragraph,
    Text,
)
from .parser import ContentError, parse_fragment
from .registry import (
    ContentPage,
    PageRegistry,
    default_registry,
    introduction_fragment,
)
from .renderer import FragmentRenderer
from .slugs import slugify

__all__ = [
    "BulletList",
    "Code",
    "CodeBlock",
    "ContentError",
    "ContentFragment",
    "ContentPage",
    "Emphasis",
    "FragmentRenderer",
    "Heading",
    "InternalLinkResolver",
    "Link",
    "PageRegistry",
    "Paragraph",
    "Text",
    "default_registry",
    "introduction_fragment",
    "parse_fragment",
    "slugify",
]
