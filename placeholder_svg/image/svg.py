"""SVG markup for placeholder images."""

from placeholder_svg.image.color import DerivedPalette, derive
from placeholder_svg.image.validator import PlaceholderRequest

DOT_CELL_SIZE = 20


def compose(request: PlaceholderRequest, palette: DerivedPalette) -> str:
    """
    Render the placeholder SVG document.

    The skeleton never changes: with gradient off both stops share the base
    color, and with dots off the pattern cell collapses to 0x0.
    """
    w = request.width
    h = request.height
    radius = request.border_radius
    cell = DOT_CELL_SIZE if request.show_dots else 0

    return f"""<svg width="{w}" height="{h}" viewBox="0 0 {w} {h}" xmlns="http://www.w3.org/2000/svg">
    <defs>
        <linearGradient id="mainGrad" x1="0%" y1="0%" x2="100%" y2="100%">
            <stop offset="0%" style="stop-color:#{palette.base};stop-opacity:1" />
            <stop offset="100%" style="stop-color:#{palette.gradient_stop};stop-opacity:1" />
        </linearGradient>
        <pattern id="dots" width="{cell}" height="{cell}" patternUnits="userSpaceOnUse">
            <circle cx="10" cy="10" r="1.2" fill="#{palette.dot_tint}" opacity="0.4"/>
        </pattern>
        <filter id="softShadow">
            <feGaussianBlur in="SourceAlpha" stdDeviation="2"/>
            <feOffset dx="0" dy="1" result="offsetblur"/>
            <feFlood flood-color="#000000" flood-opacity="0.2"/>
            <feComposite in2="offsetblur" operator="in"/>
            <feMerge>
                <feMergeNode/>
                <feMergeNode in="SourceGraphic"/>
            </feMerge>
        </filter>
        <mask id="roundedMask">
            <rect width="{w}" height="{h}" rx="{radius}" ry="{radius}" fill="white"/>
        </mask>
    </defs>
    <g mask="url(#roundedMask)">
        <rect width="{w}" height="{h}" fill="url(#mainGrad)"/>
        <rect width="{w}" height="{h}" fill="url(#dots)"/>
    </g>
    <text x="50%" y="50%" text-anchor="middle" dominant-baseline="middle"
        font-family="Arial, Helvetica, sans-serif" font-weight="bold" font-size="24"
        fill="{palette.label_color}" filter="url(#softShadow)">{w}x{h}</text>
</svg>"""


def render_placeholder(request: PlaceholderRequest) -> str:
    """Derive the palette for ``request`` and compose the SVG."""
    palette = derive(
        request.color,
        show_gradient=request.show_gradient,
        show_dots=request.show_dots,
        show_label=request.show_label,
    )
    return compose(request, palette)
