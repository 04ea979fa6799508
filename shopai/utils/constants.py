"""
Demo catalog and user-facing copy.

SAMPLE_PRODUCTS is the default catalog loaded into the CatalogStore at
startup. Tests build their own fixture catalogs instead of importing it.
"""

SAMPLE_PRODUCTS = [
    {
        "id": 1,
        "name": "Zenith X5 Smartphone",
        "category": "Electronics",
        "price": 699,
        "description": "High-performance device with OLED display and 5G connectivity.",
    },
    {
        "id": 2,
        "name": "Budget Buddy Phone",
        "category": "Electronics",
        "price": 199,
        "description": "Reliable smartphone with long battery life, perfect for students.",
    },
    {
        "id": 3,
        "name": "ProGamer Laptop 15",
        "category": "Computers",
        "price": 1299,
        "description": "RTX 4060 equipped laptop designed for high-end gaming and rendering.",
    },
    {
        "id": 4,
        "name": "AirPulse Earbuds",
        "category": "Audio",
        "price": 149,
        "description": "Active noise cancelling wireless earbuds with spatial audio.",
    },
    {
        "id": 5,
        "name": "BassBoom Speaker",
        "category": "Audio",
        "price": 89,
        "description": "Waterproof portable bluetooth speaker with deep bass.",
    },
    {
        "id": 6,
        "name": "FitTrack Watch",
        "category": "Wearables",
        "price": 120,
        "description": "Health monitoring smartwatch with heart rate and sleep tracking.",
    },
    {
        "id": 7,
        "name": "LuxLeather Satchel",
        "category": "Accessories",
        "price": 250,
        "description": "Handcrafted genuine leather bag with laptop compartment.",
    },
    {
        "id": 8,
        "name": "Mechanical Keyboard RGB",
        "category": "Computers",
        "price": 85,
        "description": "Clicky blue switches with customizable RGB backlighting.",
    },
    {
        "id": 9,
        "name": "4K UltraMonitor",
        "category": "Computers",
        "price": 350,
        "description": "27-inch IPS panel with 144Hz refresh rate and HDR support.",
    },
    {
        "id": 10,
        "name": "CozyNoise Headphones",
        "category": "Audio",
        "price": 299,
        "description": "Over-ear studio quality headphones with plush memory foam.",
    },
    {
        "id": 11,
        "name": "StreamDeck Mini",
        "category": "Accessories",
        "price": 100,
        "description": "Programmable macro pad for streamers and productivity.",
    },
    {
        "id": 12,
        "name": "Retro Game Console",
        "category": "Gaming",
        "price": 59,
        "description": "Pre-loaded with 500 classic 8-bit games, connects to TV.",
    },
]

# Example prompts offered next to the search box
SUGGESTED_QUERIES = {
    "Gaming gear under $100": "Something for gaming under $100",
    "Headphones for travel": "Best headphones for travel",
    "Cheap phone for kids": "Cheap smartphone for kids",
}

NO_MATCH_MESSAGE = (
    "I couldn't find any products matching that specific description in our catalog."
)

CONNECTIVITY_ERROR_MESSAGE = (
    "Something went wrong while connecting to the AI. Please try again."
)
