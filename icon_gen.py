"""Generate the system-tray icon (64×64 PIL Image, in-memory)."""

from datetime import date

from PIL import Image, ImageDraw, ImageFont

ICON_SIZE = 64


def create_icon_image(today: date | None = None) -> Image.Image:
    """Return a 64×64 RGBA image: today's day-of-month under a red calendar bar."""
    size = ICON_SIZE
    img = Image.new("RGBA", (size, size), "white")
    draw = ImageDraw.Draw(img)

    bar = size // 5
    draw.rectangle((0, 0, size - 1, bar), fill="#C62828")

    text = str((today or date.today()).day)
    avail_h = size - bar - 2

    # Find the largest font size that fits below the bar
    font_size = 120
    font = None
    while font_size > 10:
        try:
            font = ImageFont.truetype("segoeuib.ttf", font_size)
        except OSError:
            font = ImageFont.load_default()
            break
        bbox = draw.textbbox((0, 0), text, font=font)
        tw = bbox[2] - bbox[0]
        th = bbox[3] - bbox[1]
        if tw <= size and th <= avail_h:
            break
        font_size -= 1

    # Centre the visible pixels in the area below the bar
    bbox = draw.textbbox((0, 0), text, font=font)
    x = (size - (bbox[2] - bbox[0])) / 2 - bbox[0]
    y = bar + 1 + (avail_h - (bbox[3] - bbox[1])) / 2 - bbox[1]
    draw.text((x, y), text, fill="black", font=font)

    return img
