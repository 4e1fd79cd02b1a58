"""Basic rgbramp usage examples.

Run directly with:
    python examples/basic_usage.py
"""
from rgbramp import (
    Color,
    Segment,
    build_ramp,
    ramp_from_hex_stops,
    apply_colors_by_index,
    apply_colors_by_range,
    InMemoryElementStore,
    MarkupElementStore,
)


def demonstrate_colors() -> None:
    # Build colors from channels or HTML hex codes.
    accent = Color(255, 128, 64)
    print("Accent hex:", accent.html_color())
    print("Text on accent:", accent.html_color_contrasting())

    parsed = Color.from_hex("#0B2E4E")
    print("Parsed channels:", parsed.value, "brightness:", parsed.brightness)


def demonstrate_ramps() -> None:
    # Two blended legs with a single injected color between them.
    ramp = build_ramp(
        Segment(Color(0, 0, 128), Color(0, 200, 255), 4),
        Segment(Color(255, 255, 255), Color(255, 255, 255), 1),
        Segment(Color(255, 200, 0), Color(180, 0, 0), 4),
    )
    print("Ramp:", [c.html_color() for c in ramp])

    # Same idea from hex stops; the shared stop appears twice.
    stops = ramp_from_hex_stops(["#ffffff", "#ff8800", "#000000"], bands_per_segment=3)
    print("Stops ramp:", [c.html_color() for c in stops])


def demonstrate_styling() -> None:
    ramp = ramp_from_hex_stops(["#f7fbff", "#08306b"], bands_per_segment=5)

    # Elements that already know their band.
    store = InMemoryElementStore()
    for index in ("0", "2", "4", "9"):
        store.add({"data-band": index})
    apply_colors_by_index(store, "data-band", ramp)
    for element in store.elements:
        print("index", element.attributes["data-band"], "->", element.style or "skipped")

    # A table colored by value.
    table = MarkupElementStore.from_string(
        "<table><tr>"
        '<td data-temp="-4">-4</td><td data-temp="12">12</td><td data-temp="31">31</td>'
        "</tr></table>"
    )
    apply_colors_by_range(table, "data-temp", ramp)
    print(table.to_string())


def main() -> None:
    demonstrate_colors()
    demonstrate_ramps()
    demonstrate_styling()


if __name__ == "__main__":
    main()
