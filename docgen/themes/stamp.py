"""
Stamp Theme Engine Module.

Renders the certification stamp overlaid on documents as a self-contained
HTML fragment. A stamp is fully described by a shape variant, three text
fields (main, sub, status), a colour theme and a size class.

Variants:
    - circular / square: centred text stack in a bordered round/square box
    - rectangular: text stack in a bordered box from the elongated widths
    - official: main text underlined, status text overlined (letterhead seal)
    - vintage: circular with a thick double border and wide letter spacing
    - shield: inline SVG shield (tinted fill under a stroked outline)
    - hexagon: tinted box carrying the hexagon shape class; the clip path
      itself comes from the rendering stylesheet
    - starred: circular with the status text highlighted in amber

Author: Document Tools Team
"""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Tuple, Type, TypeVar, Union

from jinja2 import DictLoader, Environment, StrictUndefined

from config import get_config
from docgen.utils.logger import get_logger
from docgen.utils.exceptions import UnknownThemeSelectorError

logger = get_logger(__name__)

E = TypeVar("E", bound=Enum)


def coerce_selector(enum_cls: Type[E], value: Union[E, str], kind: str) -> E:
    """
    Turn a selector value into a member of its closed set.

    Raises:
        UnknownThemeSelectorError: If the value is not a member.
    """
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError:
        raise UnknownThemeSelectorError(kind, value, [m.value for m in enum_cls])


class StampVariant(Enum):
    CIRCULAR = "circular"
    RECTANGULAR = "rectangular"
    SQUARE = "square"
    OFFICIAL = "official"
    VINTAGE = "vintage"
    SHIELD = "shield"
    HEXAGON = "hexagon"
    STARRED = "starred"

    @property
    def display_name(self) -> str:
        return _VARIANT_NAMES[self]

    @property
    def elongated(self) -> bool:
        """Elongated variants take a width only and grow with their text."""
        return self in (StampVariant.RECTANGULAR, StampVariant.OFFICIAL)


_VARIANT_NAMES = {
    StampVariant.CIRCULAR: "Lingkaran",
    StampVariant.RECTANGULAR: "Persegi Panjang",
    StampVariant.SQUARE: "Persegi",
    StampVariant.OFFICIAL: "Resmi",
    StampVariant.VINTAGE: "Vintage",
    StampVariant.SHIELD: "Perisai",
    StampVariant.HEXAGON: "Heksagon",
    StampVariant.STARRED: "Bintang",
}


class ColorTheme(Enum):
    BLUE = "blue"
    RED = "red"
    GREEN = "green"
    PURPLE = "purple"
    BLACK = "black"


class SizeClass(Enum):
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"


@dataclass(frozen=True)
class ColorPalette:
    """
    Resolved colours of a theme.

    Attributes:
        border: Border accent
        text: Text accent
        rgb: "r, g, b" triplet used for computed background tints
        stroke: Outline colour of drawn shapes
        fill: Fill colour of drawn shapes
    """
    border: str
    text: str
    rgb: str
    stroke: str
    fill: str


PALETTES: Dict[ColorTheme, ColorPalette] = {
    ColorTheme.BLUE: ColorPalette("#2563eb", "#2563eb", "59, 130, 246", "#2563eb", "#3b82f6"),
    ColorTheme.RED: ColorPalette("#dc2626", "#dc2626", "239, 68, 68", "#dc2626", "#ef4444"),
    ColorTheme.GREEN: ColorPalette("#16a34a", "#16a34a", "34, 197, 94", "#16a34a", "#22c55e"),
    ColorTheme.PURPLE: ColorPalette("#9333ea", "#9333ea", "168, 85, 247", "#9333ea", "#a855f7"),
    ColorTheme.BLACK: ColorPalette("#1f2937", "#1f2937", "55, 65, 81", "#000000", "#374151"),
}


@dataclass(frozen=True)
class StampDimensions:
    """Pixel box and text tier of a size class. Elongated variants ignore height."""
    width: int
    height: Optional[int]
    font_size: int


SIZES: Dict[SizeClass, StampDimensions] = {
    SizeClass.SMALL: StampDimensions(80, 80, 12),
    SizeClass.MEDIUM: StampDimensions(96, 96, 14),
    SizeClass.LARGE: StampDimensions(112, 112, 16),
}

ELONGATED_SIZES: Dict[SizeClass, StampDimensions] = {
    SizeClass.SMALL: StampDimensions(96, None, 12),
    SizeClass.MEDIUM: StampDimensions(112, None, 14),
    SizeClass.LARGE: StampDimensions(128, None, 16),
}

AMBER = "#f59e0b"

# Shield outline in a 100x100 box: apex, shoulders, lower corners, bottom apex
SHIELD_PATH = "M50 0 L100 10 L100 60 L50 100 L0 60 L0 10 Z"


_TEMPLATES = {
    "stack.html": (
        '{% macro stack(main, sub, status, spacing="", highlight=false) %}'
        '<div class="stamp-text"{% if spacing %} style="letter-spacing: {{ spacing }};"{% endif %}>'
        '<div class="stamp-main" style="min-height: 1.25em;">{{ main }}</div>'
        '{% if sub %}<div class="stamp-sub" style="font-size: 12px; font-weight: 500; opacity: 0.75;">{{ sub }}</div>{% endif %}'
        '{% if status %}<div class="stamp-status" style="font-size: 12px; font-weight: 900; margin-top: 4px;">'
        '{% if highlight %}<span class="stamp-highlight" style="color: {{ amber }};">{{ status }}</span>{% else %}{{ status }}{% endif %}'
        '</div>{% endif %}'
        '</div>'
        '{% endmacro %}'
    ),
    "boxed.html": (
        '{% from "stack.html" import stack %}'
        '<div class="stamp stamp-{{ variant }} stamp-{{ theme }}" data-stamp="{{ variant }}" '
        'style="display: inline-flex; align-items: center; justify-content: center; box-sizing: border-box; '
        'border: {{ border_width }}px {{ border_style }} {{ palette.border }}; border-radius: {{ radius }}; '
        'color: {{ palette.text }}; width: {{ size.width }}px;{% if size.height %} height: {{ size.height }}px;{% endif %} '
        'padding: {{ padding }}; font-size: {{ size.font_size }}px; font-weight: 700; line-height: 1.25; text-align: center;">'
        '{{ stack(main, sub, status, spacing, highlight) }}'
        '</div>'
    ),
    "official.html": (
        '<div class="stamp stamp-official stamp-{{ theme }}" data-stamp="official" '
        'style="--stamp-bg-color: {{ palette.rgb }}; display: inline-block; box-sizing: border-box; '
        'background-color: rgba({{ palette.rgb }}, 0.1); border: 2px solid {{ palette.border }}; '
        'color: {{ palette.text }}; width: {{ size.width }}px; padding: 6px; '
        'font-size: {{ size.font_size }}px; font-weight: 700; line-height: 1.25; text-align: center;">'
        '<div class="stamp-text">'
        '<div class="stamp-main" style="min-height: 1.25em; border-bottom: 1px solid currentColor; padding-bottom: 4px;">{{ main }}</div>'
        '{% if sub %}<div class="stamp-sub" style="font-size: 12px; font-weight: 500; opacity: 0.75; padding: 4px 0;">{{ sub }}</div>{% endif %}'
        '{% if status %}<div class="stamp-status" style="font-size: 12px; font-weight: 900; border-top: 1px solid currentColor; padding-top: 4px;">{{ status }}</div>{% endif %}'
        '</div>'
        '</div>'
    ),
    "shield.html": (
        '{% from "stack.html" import stack %}'
        '<div class="stamp stamp-shield stamp-{{ theme }}" data-stamp="shield" '
        'style="position: relative; display: inline-flex; align-items: center; justify-content: center; '
        'color: {{ palette.text }}; width: {{ size.width }}px; height: {{ size.height }}px; '
        'font-size: {{ size.font_size }}px; font-weight: 700;">'
        '<svg style="position: absolute; inset: 0; width: 100%; height: 100%;" viewBox="0 0 100 100" preserveAspectRatio="xMidYMid meet">'
        '<path class="stamp-shape-fill" d="{{ shield_path }}" fill="{{ palette.fill }}" fill-opacity="0.1"></path>'
        '<path class="stamp-shape-stroke" d="{{ shield_path }}" fill="none" stroke="{{ palette.stroke }}" stroke-width="5"></path>'
        '</svg>'
        '<div style="position: relative; text-align: center; line-height: 1.25; padding: 8px;">{{ stack(main, sub, status) }}</div>'
        '</div>'
    ),
    "hexagon.html": (
        '{% from "stack.html" import stack %}'
        '<div class="stamp stamp-hexagon stamp-{{ theme }}" data-stamp="hexagon" '
        'style="--stamp-bg-color: {{ palette.rgb }}; display: flex; align-items: center; justify-content: center; '
        'background-color: rgba({{ palette.rgb }}, 0.1); border-color: {{ palette.border }}; color: {{ palette.text }}; '
        'width: {{ size.width }}px; height: {{ size.height }}px; padding: 8px; box-sizing: border-box; '
        'font-size: {{ size.font_size }}px; font-weight: 700; line-height: 1.25;">'
        '<div style="text-align: center;">{{ stack(main, sub, status) }}</div>'
        '</div>'
    ),
}

_environment = Environment(
    loader=DictLoader(_TEMPLATES),
    autoescape=True,
    undefined=StrictUndefined,
)
_environment.globals["amber"] = AMBER

# Box styling per variant rendered through boxed.html:
# (border width, border style, border radius, padding, letter spacing, highlight)
_BOXED_STYLES: Dict[StampVariant, Tuple[int, str, str, str, str, bool]] = {
    StampVariant.CIRCULAR: (4, "solid", "50%", "4px", "", False),
    StampVariant.RECTANGULAR: (4, "solid", "4px", "8px 12px", "", False),
    StampVariant.SQUARE: (4, "solid", "4px", "4px", "", False),
    StampVariant.VINTAGE: (8, "double", "50%", "4px", "0.1em", False),
    StampVariant.STARRED: (4, "solid", "50%", "4px", "", True),
}


@dataclass(frozen=True)
class StampConfig:
    """
    A fully specified stamp for one document type.

    Example:
        >>> StampConfig(StampVariant.CIRCULAR, "ACME", "", "LUNAS",
        ...             ColorTheme.BLUE, SizeClass.MEDIUM)
    """
    variant: StampVariant
    main_text: str
    sub_text: str = ""
    status_text: str = ""
    color: ColorTheme = ColorTheme.BLUE
    size: SizeClass = SizeClass.MEDIUM

    @classmethod
    def from_dict(cls, values: Mapping[str, Any]) -> 'StampConfig':
        """
        Build a config from loosely typed values, filling gaps from the
        configured stamp defaults.

        Raises:
            UnknownThemeSelectorError: If variant, color or size is unknown.
        """
        defaults = get_config("stamp.defaults", {}) or {}

        def pick(key: str, fallback: str = "") -> Any:
            value = values.get(key)
            return defaults.get(key, fallback) if value is None else value

        return cls(
            variant=coerce_selector(StampVariant, pick("variant", "circular"), "stamp variant"),
            main_text=str(pick("main_text")),
            sub_text=str(pick("sub_text")),
            status_text=str(pick("status_text")),
            color=coerce_selector(ColorTheme, pick("color", "blue"), "color theme"),
            size=coerce_selector(SizeClass, pick("size", "medium"), "size class"),
        )

    @classmethod
    def defaults(cls) -> 'StampConfig':
        """The config offered when a stamp is configured for the first time."""
        return cls.from_dict({})


class StampThemeEngine:
    """
    Renders stamp fragments.

    Rendering is a pure function of its inputs: identical arguments give
    byte-identical fragments.

    Example:
        >>> engine = StampThemeEngine()
        >>> html = engine.render("circular", "ACME", "Jakarta", "LUNAS",
        ...                      "blue", "medium")
        >>> "ACME" in html
        True
    """

    def render(
        self,
        variant: Union[StampVariant, str],
        main_text: str,
        sub_text: str,
        status_text: str,
        color: Union[ColorTheme, str],
        size: Union[SizeClass, str]
    ) -> str:
        """
        Render one stamp.

        Args:
            variant: Shape variant. Unknown variants render nothing.
            main_text: Always rendered, a blank line when empty.
            sub_text: Omitted when empty.
            status_text: Omitted when empty.
            color: Colour theme.
            size: Size class.

        Returns:
            HTML fragment, or "" for an unknown variant.

        Raises:
            UnknownThemeSelectorError: If color or size is unknown.
        """
        theme = coerce_selector(ColorTheme, color, "color theme")
        size_class = coerce_selector(SizeClass, size, "size class")

        try:
            variant = StampVariant(variant)
        except ValueError:
            logger.debug(f"Unknown stamp variant '{variant}', rendering nothing")
            return ""

        palette = PALETTES[theme]
        dimensions = ELONGATED_SIZES[size_class] if variant.elongated else SIZES[size_class]

        context = {
            "variant": variant.value,
            "theme": theme.value,
            "palette": palette,
            "size": dimensions,
            "main": main_text,
            "sub": sub_text,
            "status": status_text,
        }

        if variant is StampVariant.OFFICIAL:
            template = "official.html"
        elif variant is StampVariant.SHIELD:
            template = "shield.html"
            context["shield_path"] = SHIELD_PATH
        elif variant is StampVariant.HEXAGON:
            template = "hexagon.html"
        else:
            border_width, border_style, radius, padding, spacing, highlight = _BOXED_STYLES[variant]
            template = "boxed.html"
            context.update(
                border_width=border_width,
                border_style=border_style,
                radius=radius,
                padding=padding,
                spacing=spacing,
                highlight=highlight,
            )

        return _environment.get_template(template).render(**context)

    def render_config(self, config: StampConfig, size: Optional[SizeClass] = None) -> str:
        """Render a StampConfig, optionally overriding its size."""
        return self.render(
            config.variant,
            config.main_text,
            config.sub_text,
            config.status_text,
            config.color,
            size or config.size,
        )

    def preview(self, config: StampConfig) -> str:
        """Small rendering shown next to the form once a stamp is applied."""
        return self.render_config(replace(config, size=SizeClass.SMALL))

    def gallery(self) -> List[Tuple[StampVariant, str, str]]:
        """
        Sample rendering of every variant for the template picker.

        Returns:
            List of (variant, display name, fragment).
        """
        return [
            (
                variant,
                variant.display_name,
                self.render(variant, "CONTOH", "Teks", "STATUS", ColorTheme.BLUE, SizeClass.SMALL),
            )
            for variant in StampVariant
        ]
