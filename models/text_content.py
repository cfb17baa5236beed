"""Static text shown by the viewer, kept in one table for easy editing."""

TEXT_CONTENT = {
    "pageTitle": "Species Complex Needs Diagram",
    "header": {
        "title": "Species Complex Needs Diagram",
        "subtitle": "Select 3 species to view the corresponding diagram",
    },
    "sections": {
        "items": {
            "title": "Species",
            "selectionInfo": "/ 3 selected",
        },
        "diagram": {
            "title": "Venn Diagram",
            "placeholder": {
                "icon": "📊",
                "message": "Select exactly 3 species to view the diagram",
            },
            "errorMessage": "Diagram not found for selected species",
        },
    },
    "items": {
        "namePrefix": "Species",
        "altTextPrefix": "Species",
        "names": ["Humans", "Beavers", "Lizards", "Harpies", "Foxes", "Frogs", "Bats"],
    },
    "notifications": {
        "maxSelections": "You can only select up to 3 species",
    },
    "diagrams": {
        "altTextPrefix": "Diagram for species",
    },
}


def get_text(path, table=None):
    """Look up a dotted path such as ``"header.title"``.

    Returns None if any segment along the path is missing.
    """
    current = TEXT_CONTENT if table is None else table
    for key in path.split("."):
        if not isinstance(current, dict) or key not in current:
            return None
        current = current[key]
    return current
