"""
presentation/deck/samples.py -- Built-in sample deck rendered by the CLI
"""

from presentation.deck.models import BulletSlide, ImageSlide, SlideSpec, TitleSlide


def hello_world_slides(image_path: str = "image.png") -> list[SlideSpec]:
    """Return the four-slide demo deck: title, bullets, image, title."""
    return [
        TitleSlide(text="Hello, World!"),
        BulletSlide(title="Fizz", items=["• foo", "• bar", "• baz"]),
        ImageSlide(path=image_path),
        TitleSlide(text="Goodbye, World!"),
    ]
