"""Built-in style choices offered by the cartoon form."""

OTHER_STYLE = "Other..."

MAGAZINES = [
    "The New Yorker",
    "Punch",
    "Mad Magazine",
    "Private Eye",
    "Charlie Hebdo",
    "The Nib",
    "American Bystander",
    "Funny Times",
]

CARTOONISTS = [
    "Charles Addams",
    "Gary Larson",
    "Bill Watterson",
    "Roz Chast",
    "Saul Steinberg",
    "Gahan Wilson",
    "Matt Groening",
    "Quentin Blake",
    "Dr. Seuss",
    "R. Crumb",
]

STYLE_CATALOG: dict[str, list[str]] = {
    "magazine": MAGAZINES,
    "cartoonist": CARTOONISTS,
}


def resolve_style_name(selected: str, custom: str = "") -> str:
    """The custom text wins when the "Other..." entry is selected."""
    if selected == OTHER_STYLE:
        return custom
    return selected
