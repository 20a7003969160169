from models import Section

# Hardcoded fallbacks, used when links.json is missing or leaves a field blank
DEFAULT_SKIPT_SKOOL_URL = "https://skiptskool.onrender.com/"
DEFAULT_SVG_IMAGE = "./assets/SKPTSKL-T1.svg"

SECTION_COUNT = 5

japan_imports = {
    "section1": Section(
        title="K Trucks",
        content="Browse our selection of compact Japanese Kei trucks, perfect for urban deliveries and small businesses. Features include excellent fuel economy and easy maneuverability.",
    ),
    "section2": Section(
        title="Kotatsu",
        content="Authentic Japanese Kotatsu tables, combining comfort and functionality. Perfect for keeping warm during winter while enjoying meals or relaxing.",
    ),
    "section3": Section(
        title="Anime",
        content="Explore our collection of Japanese animation, movies, music, and other media. Direct imports from Japan with original packaging.",
    ),
    "section4": Section(
        title="Japanese Store",
        content="Discover unique Japanese clothing styles and household items. From traditional wear to modern Japanese home goods.",
    ),
    "section5": Section(title="Gaijin Haiku", content=""),
}

# Sidebar navigation: each entry is one submenu disclosure
nav_menu = [
    {
        "name": "imports",
        "label": "Imports",
        "items": [
            {"label": "K Trucks", "href": "#section1"},
            {"label": "Kotatsu", "href": "#section2"},
            {"label": "Anime", "href": "#section3"},
        ],
    },
    {
        "name": "store",
        "label": "Store",
        "items": [
            {"label": "Japanese Store", "href": "#section4"},
            {"label": "Gaijin Haiku", "href": "#section5"},
        ],
    },
    {
        "name": "about",
        "label": "About",
        "items": [
            {"label": "Newsletter", "href": "#newsletter"},
        ],
    },
]

# Fields shown in the K Truck detail modal, in display order
spec_fields = [
    ("year", "Year"),
    ("engine", "Engine"),
    ("transmission", "Transmission"),
    ("capacity", "Capacity"),
    ("mileage", "Mileage"),
    ("price", "Price"),
]
