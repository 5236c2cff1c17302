"""
Snippets — Hero Component
==========================

What:  A full-width image with a heading on top.
How:   Stateless. render_hero fills components/hero.html; the marketing
       routes describe each page with a HeroPage and render it through
       render_hero.
"""

from dataclasses import dataclass

from snippets.views.rendering import render


@dataclass(frozen=True)
class HeroPage:
    """
    The three inputs of one Hero.

    Attributes:
        image_src:  URL of the background image
        image_alt:  Alt text for the image
        title:      Heading shown over the image
    """

    image_src: str
    image_alt: str
    title: str


def render_hero(image_src: str, image_alt: str, title: str) -> str:
    return render(
        "components/hero.html",
        hero=HeroPage(image_src=image_src, image_alt=image_alt, title=title),
    )


PERFORMANCE = HeroPage(
    image_src="/static/performance.jpg",
    image_alt="welding",
    title="A high performance",
)

RELIABILITY = HeroPage(
    image_src="/static/reliability.jpg",
    image_alt="welding",
    title="Super high reliability hosting",
)
