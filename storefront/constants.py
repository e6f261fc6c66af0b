CATEGORIES = {
    "mobile": "Mobiles",
    "laptop": "Laptops",
    "accessory": "Accessories",
}

# cart persistence keys: cart_<uid> / cart_guest
CART_KEY_PREFIX = "cart_"
GUEST_SCOPE = "guest"

SORT_PRICE_ASC = "price_asc"
SORT_PRICE_DESC = "price_desc"
SORT_NEWEST = "newest"
SORT_POPULARITY = "popularity"

DEFAULT_RATING = "4.0"
