"""Static lookup data shared by the passes.

Everything here is built once at import time and never mutated.
"""

from types import MappingProxyType

SVG_NS = "http://www.w3.org/2000/svg"
XLINK_NS = "http://www.w3.org/1999/xlink"
XML_NS = "http://www.w3.org/XML/1998/namespace"

# --- editor vocabularies -----------------------------------------------------

EDITOR_NAMESPACES = frozenset({
    "http://www.inkscape.org/namespaces/inkscape",
    "http://sodipodi.sourceforge.net/DTD/sodipodi-0.dtd",
    "http://inkscape.sourceforge.net/DTD/sodipodi-0.dtd",
    "http://ns.adobe.com/AdobeIllustrator/10.0/",
    "http://ns.adobe.com/AdobeSVGViewerExtensions/3.0/",
    "http://ns.adobe.com/Extensibility/1.0/",
    "http://ns.adobe.com/Flows/1.0/",
    "http://ns.adobe.com/GenericCustomNamespace/1.0/",
    "http://ns.adobe.com/Graphs/1.0/",
    "http://ns.adobe.com/ImageReplacement/1.0/",
    "http://ns.adobe.com/SaveForWeb/1.0/",
    "http://ns.adobe.com/Variables/1.0/",
    "http://ns.adobe.com/XPath/1.0/",
    "http://www.bohemiancoding.com/sketch/ns",
    "http://www.serif.com/",
    "http://www.vector.evaxdesign.sk",
    "http://www.figma.com/figma/ns",
    "http://vectornator.io",
})

EDITOR_STYLE_PREFIXES = ("-inkscape-",)

# --- element categories ------------------------------------------------------

METADATA_ELEMENTS = frozenset({"metadata", "title", "desc"})

# Containers that are safe to delete once they hold nothing.
REMOVABLE_EMPTY_CONTAINERS = frozenset({
    "a", "defs", "g", "marker", "mask", "pattern", "switch", "symbol", "clipPath",
})

# Elements that draw something (or group things that do); display/visibility
# apply to them directly.
RENDERABLE_ELEMENTS = frozenset({
    "a", "circle", "ellipse", "foreignObject", "g", "image", "line", "path", "polygon",
    "polyline", "rect", "svg", "switch", "text", "textPath", "tspan", "use",
})

TEXT_CONTENT_ELEMENTS = frozenset({"text", "tspan", "textPath", "title", "desc"})

RAW_TEXT_ELEMENTS = frozenset({"style", "script"})

ANIMATION_ELEMENTS = frozenset({"animate", "animateColor", "animateMotion", "animateTransform", "set"})

# Elements whose attributes may be inherited from a template via href.
TEMPLATED_ELEMENTS = frozenset({"linearGradient", "radialGradient", "pattern", "filter"})

# --- attribute categories ----------------------------------------------------

COLOR_PROPERTIES = frozenset({
    "color", "fill", "flood-color", "lighting-color", "solid-color", "stop-color", "stroke",
})

# Attributes holding a single number, optionally followed by a unit.
NUMERIC_ATTRIBUTES = frozenset({
    "cx", "cy", "dx", "dy", "fill-opacity", "font-size", "fr", "fx", "fy", "height",
    "k1", "k2", "k3", "k4", "letter-spacing", "offset", "opacity", "pathLength",
    "r", "refX", "refY", "rx", "ry", "startOffset", "stop-opacity", "flood-opacity",
    "stroke-dashoffset", "stroke-miterlimit", "stroke-opacity", "stroke-width",
    "width", "word-spacing", "x", "x1", "x2", "y", "y1", "y2",
})

# Attributes holding a list of numbers.
NUMBER_LIST_ATTRIBUTES = frozenset({"stroke-dasharray", "viewBox"})

TRANSFORM_ATTRIBUTES = frozenset({"gradientTransform", "patternTransform", "transform"})

# Attributes holding path data, keyed by the element that carries them.
PATH_DATA_ATTRIBUTES = MappingProxyType({
    "path": "d",
    "glyph": "d",
    "missing-glyph": "d",
    "animateMotion": "path",
})

POINTS_ELEMENTS = frozenset({"polygon", "polyline"})

# --- defaults ----------------------------------------------------------------

# Presentation properties that children inherit; a default on a child can
# override a non-default ancestor value, so these need an ancestor check.
INHERITED_PROPERTIES = frozenset({
    "clip-rule", "color", "color-interpolation", "color-interpolation-filters",
    "color-rendering", "cursor", "direction", "dominant-baseline", "fill", "fill-opacity",
    "fill-rule", "font", "font-family", "font-size", "font-size-adjust", "font-stretch",
    "font-style", "font-variant", "font-weight", "image-rendering", "letter-spacing",
    "marker", "marker-end", "marker-mid", "marker-start", "paint-order", "pointer-events",
    "shape-rendering", "stroke", "stroke-dasharray", "stroke-dashoffset", "stroke-linecap",
    "stroke-linejoin", "stroke-miterlimit", "stroke-opacity", "stroke-width", "text-anchor",
    "text-rendering", "visibility", "word-spacing", "writing-mode",
})

# Presentation property defaults, valid on any element.
PROPERTY_DEFAULTS = MappingProxyType({
    "alignment-baseline": "auto",
    "baseline-shift": "baseline",
    "clip-path": "none",
    "clip-rule": "nonzero",
    "color-interpolation": "sRGB",
    "color-interpolation-filters": "linearRGB",
    "direction": "ltr",
    "display": "inline",
    "dominant-baseline": "auto",
    "fill": "#000",
    "fill-opacity": "1",
    "fill-rule": "nonzero",
    "filter": "none",
    "flood-color": "#000",
    "flood-opacity": "1",
    "font-size-adjust": "none",
    "font-stretch": "normal",
    "font-style": "normal",
    "font-variant": "normal",
    "font-weight": "normal",
    "image-rendering": "auto",
    "letter-spacing": "normal",
    "lighting-color": "#fff",
    "marker-end": "none",
    "marker-mid": "none",
    "marker-start": "none",
    "mask": "none",
    "opacity": "1",
    "paint-order": "normal",
    "shape-rendering": "auto",
    "stop-color": "#000",
    "stop-opacity": "1",
    "stroke": "none",
    "stroke-dasharray": "none",
    "stroke-dashoffset": "0",
    "stroke-linecap": "butt",
    "stroke-linejoin": "miter",
    "stroke-miterlimit": "4",
    "stroke-opacity": "1",
    "stroke-width": "1",
    "text-anchor": "start",
    "text-decoration": "none",
    "text-rendering": "auto",
    "unicode-bidi": "normal",
    "visibility": "visible",
    "word-spacing": "normal",
    "writing-mode": "lr-tb",
})

# Extra spellings that mean the same thing as the default.
DEFAULT_ALIASES = MappingProxyType({
    "font-weight": frozenset({"400"}),
    "writing-mode": frozenset({"lr", "horizontal-tb"}),
    "preserveAspectRatio": frozenset({"xMidYMid"}),
})

# Element-specific attribute defaults.
ELEMENT_DEFAULTS = MappingProxyType({
    "svg": MappingProxyType({
        "x": "0", "y": "0", "version": "1.1", "baseProfile": "none",
        "preserveAspectRatio": "xMidYMid meet", "zoomAndPan": "magnify",
    }),
    "rect": MappingProxyType({"x": "0", "y": "0"}),
    "circle": MappingProxyType({"cx": "0", "cy": "0"}),
    "ellipse": MappingProxyType({"cx": "0", "cy": "0"}),
    "line": MappingProxyType({"x1": "0", "y1": "0", "x2": "0", "y2": "0"}),
    "image": MappingProxyType({"x": "0", "y": "0", "preserveAspectRatio": "xMidYMid meet"}),
    "use": MappingProxyType({"x": "0", "y": "0"}),
    "foreignObject": MappingProxyType({"x": "0", "y": "0"}),
    "symbol": MappingProxyType({"preserveAspectRatio": "xMidYMid meet"}),
    "marker": MappingProxyType({
        "markerUnits": "strokeWidth", "refX": "0", "refY": "0",
        "markerWidth": "3", "markerHeight": "3", "orient": "0",
    }),
    "linearGradient": MappingProxyType({
        "x1": "0", "y1": "0", "x2": "100%", "y2": "0",
        "gradientUnits": "objectBoundingBox", "spreadMethod": "pad",
    }),
    "radialGradient": MappingProxyType({
        "cx": "50%", "cy": "50%", "r": "50%",
        "gradientUnits": "objectBoundingBox", "spreadMethod": "pad",
    }),
    "pattern": MappingProxyType({
        "x": "0", "y": "0", "patternUnits": "objectBoundingBox",
        "patternContentUnits": "userSpaceOnUse",
    }),
    "clipPath": MappingProxyType({"clipPathUnits": "userSpaceOnUse"}),
    "mask": MappingProxyType({"maskUnits": "objectBoundingBox", "maskContentUnits": "userSpaceOnUse"}),
    "filter": MappingProxyType({"primitiveUnits": "userSpaceOnUse"}),
    "stop": MappingProxyType({"offset": "0"}),
    "feColorMatrix": MappingProxyType({"type": "matrix"}),
    "feComposite": MappingProxyType({"operator": "over", "k1": "0", "k2": "0", "k3": "0", "k4": "0"}),
    "feBlend": MappingProxyType({"mode": "normal"}),
    "feTurbulence": MappingProxyType({
        "baseFrequency": "0", "numOctaves": "1", "seed": "0",
        "stitchTiles": "noStitch", "type": "turbulence",
    }),
    "textPath": MappingProxyType({"startOffset": "0", "method": "align", "spacing": "exact"}),
})

# --- colors ------------------------------------------------------------------

NAMED_COLORS = MappingProxyType({
    "aliceblue": "#f0f8ff", "antiquewhite": "#faebd7", "aqua": "#00ffff",
    "aquamarine": "#7fffd4", "azure": "#f0ffff", "beige": "#f5f5dc",
    "bisque": "#ffe4c4", "black": "#000000", "blanchedalmond": "#ffebcd",
    "blue": "#0000ff", "blueviolet": "#8a2be2", "brown": "#a52a2a",
    "burlywood": "#deb887", "cadetblue": "#5f9ea0", "chartreuse": "#7fff00",
    "chocolate": "#d2691e", "coral": "#ff7f50", "cornflowerblue": "#6495ed",
    "cornsilk": "#fff8dc", "crimson": "#dc143c", "cyan": "#00ffff",
    "darkblue": "#00008b", "darkcyan": "#008b8b", "darkgoldenrod": "#b8860b",
    "darkgray": "#a9a9a9", "darkgreen": "#006400", "darkgrey": "#a9a9a9",
    "darkkhaki": "#bdb76b", "darkmagenta": "#8b008b", "darkolivegreen": "#556b2f",
    "darkorange": "#ff8c00", "darkorchid": "#9932cc", "darkred": "#8b0000",
    "darksalmon": "#e9967a", "darkseagreen": "#8fbc8f", "darkslateblue": "#483d8b",
    "darkslategray": "#2f4f4f", "darkslategrey": "#2f4f4f", "darkturquoise": "#00ced1",
    "darkviolet": "#9400d3", "deeppink": "#ff1493", "deepskyblue": "#00bfff",
    "dimgray": "#696969", "dimgrey": "#696969", "dodgerblue": "#1e90ff",
    "firebrick": "#b22222", "floralwhite": "#fffaf0", "forestgreen": "#228b22",
    "fuchsia": "#ff00ff", "gainsboro": "#dcdcdc", "ghostwhite": "#f8f8ff",
    "gold": "#ffd700", "goldenrod": "#daa520", "gray": "#808080",
    "green": "#008000", "greenyellow": "#adff2f", "grey": "#808080",
    "honeydew": "#f0fff0", "hotpink": "#ff69b4", "indianred": "#cd5c5c",
    "indigo": "#4b0082", "ivory": "#fffff0", "khaki": "#f0e68c",
    "lavender": "#e6e6fa", "lavenderblush": "#fff0f5", "lawngreen": "#7cfc00",
    "lemonchiffon": "#fffacd", "lightblue": "#add8e6", "lightcoral": "#f08080",
    "lightcyan": "#e0ffff", "lightgoldenrodyellow": "#fafad2", "lightgray": "#d3d3d3",
    "lightgreen": "#90ee90", "lightgrey": "#d3d3d3", "lightpink": "#ffb6c1",
    "lightsalmon": "#ffa07a", "lightseagreen": "#20b2aa", "lightskyblue": "#87cefa",
    "lightslategray": "#778899", "lightslategrey": "#778899", "lightsteelblue": "#b0c4de",
    "lightyellow": "#ffffe0", "lime": "#00ff00", "limegreen": "#32cd32",
    "linen": "#faf0e6", "magenta": "#ff00ff", "maroon": "#800000",
    "mediumaquamarine": "#66cdaa", "mediumblue": "#0000cd", "mediumorchid": "#ba55d3",
    "mediumpurple": "#9370db", "mediumseagreen": "#3cb371", "mediumslateblue": "#7b68ee",
    "mediumspringgreen": "#00fa9a", "mediumturquoise": "#48d1cc", "mediumvioletred": "#c71585",
    "midnightblue": "#191970", "mintcream": "#f5fffa", "mistyrose": "#ffe4e1",
    "moccasin": "#ffe4b5", "navajowhite": "#ffdead", "navy": "#000080",
    "oldlace": "#fdf5e6", "olive": "#808000", "olivedrab": "#6b8e23",
    "orange": "#ffa500", "orangered": "#ff4500", "orchid": "#da70d6",
    "palegoldenrod": "#eee8aa", "palegreen": "#98fb98", "paleturquoise": "#afeeee",
    "palevioletred": "#db7093", "papayawhip": "#ffefd5", "peachpuff": "#ffdab9",
    "peru": "#cd853f", "pink": "#ffc0cb", "plum": "#dda0dd",
    "powderblue": "#b0e0e6", "purple": "#800080", "rebeccapurple": "#663399",
    "red": "#ff0000", "rosybrown": "#bc8f8f", "royalblue": "#4169e1",
    "saddlebrown": "#8b4513", "salmon": "#fa8072", "sandybrown": "#f4a460",
    "seagreen": "#2e8b57", "seashell": "#fff5ee", "sienna": "#a0522d",
    "silver": "#c0c0c0", "skyblue": "#87ceeb", "slateblue": "#6a5acd",
    "slategray": "#708090", "slategrey": "#708090", "snow": "#fffafa",
    "springgreen": "#00ff7f", "steelblue": "#4682b4", "tan": "#d2b48c",
    "teal": "#008080", "thistle": "#d8bfd8", "tomato": "#ff6347",
    "turquoise": "#40e0d0", "violet": "#ee82ee", "wheat": "#f5deb3",
    "white": "#ffffff", "whitesmoke": "#f5f5f5", "yellow": "#ffff00",
    "yellowgreen": "#9acd32",
})


def _shortest_names() -> MappingProxyType:
    # Several names share one value (aqua/cyan, gray/grey...); keep the
    # shortest, alphabetically first on ties.
    by_hex: dict[str, str] = {}
    for name in sorted(NAMED_COLORS, key=lambda n: (len(n), n)):
        by_hex.setdefault(NAMED_COLORS[name], name)
    return MappingProxyType(by_hex)


COLOR_NAMES_BY_HEX = _shortest_names()
