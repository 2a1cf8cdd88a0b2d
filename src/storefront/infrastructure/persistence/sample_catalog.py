"""Catalog written to ``products.json`` the first time it is opened."""

SAMPLE_PRODUCTS: list[dict] = [
    {
        "id": "1",
        "title": "SMC Trading Fundamentals",
        "price": "79.99",
        "description": (
            "A comprehensive guide to Smart Money Concepts (SMC) trading "
            "fundamentals. Learn the core principles of market structure "
            "and price action."
        ),
        "image": "/placeholder.svg",
        "featured": True,
        "categories": ["SMC", "Fundamentals"],
        "variants": [
            {"id": "v1", "name": "Standard", "price": None},
            {"id": "v2", "name": "Standard + Workbook", "price": "99.99"},
        ],
        "features": [
            "Understanding market structure",
            "Identifying liquidity pools",
            "Price action patterns",
            "Entry and exit strategies",
            "Risk management techniques",
        ],
    },
    {
        "id": "2",
        "title": "ICT Trader's Guide",
        "price": "69.99",
        "description": (
            "Master Inner Circle Trader (ICT) concepts with this complete "
            "trading guide."
        ),
        "image": "/placeholder.svg",
        "featured": True,
        "categories": ["ICT", "Strategies"],
        "variants": [{"id": "2-standard", "name": "Standard", "price": None}],
        "features": [
            "Institutional order flow",
            "Kill zones and optimal trading times",
            "Fair value gaps and mitigation",
        ],
    },
    {
        "id": "3",
        "title": "Advanced Market Structure Analysis",
        "price": "59.99",
        "description": "Identify and capitalize on high-probability trade setups.",
        "image": "/placeholder.svg",
        "featured": False,
        "categories": ["Advanced", "Market Structure"],
        "variants": [{"id": "3-standard", "name": "Standard", "price": None}],
        "features": ["Multi-timeframe analysis", "Wyckoff method integration"],
    },
    {
        "id": "4",
        "title": "Supply and Demand Mastery",
        "price": "49.99",
        "description": "Trade supply and demand zones like an institution.",
        "image": "/placeholder.svg",
        "featured": False,
        "categories": ["Supply and Demand", "Price Action"],
        "variants": [{"id": "4-standard", "name": "Standard", "price": None}],
        "features": ["Fresh vs. tested zones", "Zone strength analysis"],
    },
    {
        "id": "5",
        "title": "Trader Psychology Blueprint",
        "price": "39.99",
        "description": "Overcome emotional biases and trade with discipline.",
        "image": "/placeholder.svg",
        "featured": True,
        "categories": ["Psychology", "Mindset"],
        "variants": [{"id": "5-standard", "name": "Standard", "price": None}],
        "features": ["Managing trading stress", "Creating a trading routine"],
    },
    {
        "id": "6",
        "title": "Complete Trading Plan Template",
        "price": "19.99",
        "description": "A structured template for your personalized trading plan.",
        "image": "/placeholder.svg",
        "featured": False,
        "categories": ["Planning", "Organization"],
        "variants": [{"id": "6-standard", "name": "Standard", "price": None}],
        "features": ["Risk management guidelines", "Trading journal structure"],
    },
]
