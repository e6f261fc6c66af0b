from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, List, Optional

from storefront.catalog.repository import CatalogRepository
from storefront.errors import ValidationError

log = logging.getLogger(__name__)

_UNSPLASH = "https://images.unsplash.com/photo-{}?ixlib=rb-4.0.3&auto=format&fit=crop&w={}&q=80"

HERO_SLIDES: List[Dict[str, Any]] = [
    {
        "id": 1,
        "imageUrl": _UNSPLASH.format("1531297484001-80022131f5a1", 2070),
        "title": "Next-Gen Tech",
        "description": "Discover the latest in mobile and laptop technology with deals you won't find anywhere else.",
        "primaryButtonText": "Shop Mobiles",
        "primaryButtonLink": "#mobile",
        "secondaryButtonText": "Shop Laptops",
        "secondaryButtonLink": "#laptop",
    },
    {
        "id": 2,
        "imageUrl": _UNSPLASH.format("1551651653-c5186a1fbba2", 2070),
        "title": "Premium Devices",
        "description": "Experience excellence with our range of premium laptops engineered for performance.",
        "primaryButtonText": "Explore Laptops",
        "primaryButtonLink": "#laptop",
        "secondaryButtonText": "Special Offers",
        "secondaryButtonLink": "#special-offers",
        "primaryButtonColor": "secondary",
    },
    {
        "id": 3,
        "imageUrl": _UNSPLASH.format("1511707171634-5f897ff02aa9", 2080),
        "title": "Smart Connectivity",
        "description": "Stay connected with cutting-edge smartphones that enhance your digital lifestyle.",
        "primaryButtonText": "Browse Smartphones",
        "primaryButtonLink": "#mobile",
        "secondaryButtonText": "View Accessories",
        "secondaryButtonLink": "#accessories",
        "primaryButtonColor": "accent",
    },
]

MOBILE_PRODUCTS = [
    {
        "name": "UltraPhone X23",
        "description": '6.7" AMOLED Display, 8GB RAM, 256GB Storage',
        "category": "mobile",
        "price": "799",
        "imageUrl": _UNSPLASH.format("1592750475338-74b7b21085ab", 600),
        "features": ["processor:Quantum Processor", "camera:108MP Camera", "battery:5000mAh Battery", "storage:256GB Storage"],
        "rating": "4.5",
        "reviewCount": 42,
        "badge": "New",
        "isNew": True,
        "stockCount": 50,
    },
    {
        "name": "Galaxy S23",
        "description": '6.5" Dynamic AMOLED, 12GB RAM, 512GB Storage',
        "category": "mobile",
        "price": "849",
        "originalPrice": "999",
        "imageUrl": _UNSPLASH.format("1616348436168-de43ad0db179", 600),
        "features": ["processor:Exynos 2200", "camera:50MP Camera", "battery:4500mAh Battery", "storage:512GB Storage"],
        "rating": "4.0",
        "reviewCount": 38,
        "badge": "-15%",
        "stockCount": 35,
    },
    {
        "name": "Pixel 7 Pro",
        "description": '6.3" OLED Display, 12GB RAM, 128GB Storage',
        "category": "mobile",
        "price": "749",
        "imageUrl": _UNSPLASH.format("1550367083-9fa5411cb8af", 600),
        "features": ["processor:Google Tensor", "camera:48MP Camera", "battery:4700mAh Battery", "storage:128GB Storage"],
        "rating": "5.0",
        "reviewCount": 52,
        "stockCount": 20,
    },
    {
        "name": "iPhoneXS",
        "description": '6.1" Super Retina XDR, 6GB RAM, 256GB Storage',
        "category": "mobile",
        "price": "899",
        "imageUrl": _UNSPLASH.format("1606041008023-472dfb5e530f", 600),
        "features": ["processor:A15 Bionic", "camera:12MP Camera", "battery:3200mAh Battery", "storage:256GB Storage"],
        "rating": "4.5",
        "reviewCount": 128,
        "badge": "Top Rated",
        "stockCount": 45,
    },
]

LAPTOP_PRODUCTS = [
    {
        "name": "MacBook Pro M2",
        "description": '14" Retina Display, 16GB RAM, 512GB SSD',
        "category": "laptop",
        "price": "1999",
        "imageUrl": _UNSPLASH.format("1603302576837-37561b2e2302", 600),
        "features": ["processor:M2 Pro", "memory:16GB RAM", "storage:512GB SSD", 'display:14" Retina'],
        "rating": "5.0",
        "reviewCount": 74,
        "badge": "New",
        "isNew": True,
        "stockCount": 25,
    },
    {
        "name": "Dell XPS 15",
        "description": '15.6" 4K UHD, 32GB RAM, 1TB SSD, RTX 3050',
        "category": "laptop",
        "price": "1599",
        "originalPrice": "1999",
        "imageUrl": _UNSPLASH.format("1496181133206-80ce9b88a853", 600),
        "features": ["processor:Intel i9", "memory:32GB RAM", "storage:1TB SSD", "gpu:RTX 3050"],
        "rating": "4.5",
        "reviewCount": 56,
        "badge": "-20%",
        "stockCount": 15,
    },
    {
        "name": "HP Spectre x360",
        "description": '13.5" OLED Touch, 16GB RAM, 1TB SSD',
        "category": "laptop",
        "price": "1349",
        "imageUrl": _UNSPLASH.format("1531297484001-80022131f5a1", 600),
        "features": ["processor:Intel i7", "memory:16GB RAM", "storage:1TB SSD", 'display:13.5" OLED Touch'],
        "rating": "4.0",
        "reviewCount": 41,
        "badge": "Best Seller",
        "stockCount": 18,
    },
]

ACCESSORY_PRODUCTS = [
    {
        "name": "Wireless Earbuds Pro",
        "description": "Noise cancellation, 24h battery life",
        "category": "accessory",
        "price": "129",
        "imageUrl": _UNSPLASH.format("1605464315542-bda3e2f4e605", 400),
        "features": ["noise-cancellation:Active", "battery:24h", "waterproof:IPX4"],
        "rating": "4.3",
        "reviewCount": 87,
        "stockCount": 120,
    },
    {
        "name": "SmartWatch X1",
        "description": "Health tracking, GPS, 7-day battery",
        "category": "accessory",
        "price": "199",
        "imageUrl": _UNSPLASH.format("1527864550417-7fd91fc51a46", 400),
        "features": ["battery:7 days", "gps:Built-in", "waterproof:50m"],
        "rating": "4.7",
        "reviewCount": 65,
        "stockCount": 30,
    },
    {
        "name": "Fast Wireless Charger",
        "description": "15W Qi charging, compatible with all devices",
        "category": "accessory",
        "price": "49",
        "imageUrl": _UNSPLASH.format("1592899677977-9c10ca588bbd", 400),
        "features": ["power:15W", "compatibility:Universal", "type:Qi Standard"],
        "rating": "4.2",
        "reviewCount": 129,
        "stockCount": 200,
    },
    {
        "name": "Pro Laptop Backpack",
        "description": "Water-resistant, anti-theft, USB charging port",
        "category": "accessory",
        "price": "89",
        "imageUrl": _UNSPLASH.format("1572569511254-d8f925fe2cbb", 400),
        "features": ["material:Water-resistant", "security:Anti-theft", "charging:USB Port"],
        "rating": "4.8",
        "reviewCount": 204,
        "stockCount": 75,
    },
]

FEATURED_PRODUCT = {
    "name": "UltraPhone X23 Pro",
    "description": (
        "Experience next-level photography and performance with our flagship smartphone "
        "featuring a revolutionary camera system and the fastest processor yet."
    ),
    "category": "mobile",
    "price": "999",
    "originalPrice": "1099",
    "imageUrl": _UNSPLASH.format("1600541519467-937869997e34", 1000),
    "features": ["processor:Quantum Processor", "camera:108MP Camera", "battery:5000mAh Battery", "storage:12GB RAM"],
    "rating": "4.9",
    "reviewCount": 156,
    "badge": "New Arrival",
    "isNew": True,
    "isFeatured": True,
    "stockCount": 10,
}


def special_offers(now: Optional[datetime] = None) -> List[Dict[str, Any]]:
    now = now or datetime.now(timezone.utc)
    return [
        {
            "title": "UltraPhone X23 Pro + Wireless Earbuds",
            "description": "Get our flagship smartphone bundled with wireless earbuds at a special price.",
            "price": "1099",
            "originalPrice": "1228",
            "imageUrl": _UNSPLASH.format("1606041011872-596597976b25", 600),
            "badge": "Deal of the Day",
            "endDate": (now + timedelta(days=3)).isoformat(),
        },
        {
            "title": "Dell XPS 15 + Backpack",
            "description": "Premium laptop bundled with a pro backpack for the ultimate portable setup.",
            "price": "1649",
            "originalPrice": "2088",
            "imageUrl": _UNSPLASH.format("1593642702821-c8da6771f0c6", 600),
            "badge": "Flash Sale",
            "endDate": (now + timedelta(days=5)).isoformat(),
        },
    ]


def seed_catalog(repo: CatalogRepository, now: Optional[datetime] = None) -> None:
    if not repo.list_products():
        created = 0
        for data in [*MOBILE_PRODUCTS, *LAPTOP_PRODUCTS, *ACCESSORY_PRODUCTS, FEATURED_PRODUCT]:
            try:
                repo.create_product(data)
                created += 1
            except ValidationError as e:
                log.warning("skipping seed product %r: %s", data.get("name"), e)
        log.info("Products initialized: %d", created)

    if not repo.list_special_offers():
        created = 0
        for data in special_offers(now):
            try:
                repo.create_special_offer(data)
                created += 1
            except ValidationError as e:
                log.warning("skipping seed offer %r: %s", data.get("title"), e)
        log.info("Special offers initialized: %d", created)
