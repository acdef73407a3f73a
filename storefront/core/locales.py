# storefront/core/locales.py

# Errors
ERROR_NOT_AUTHENTICATED = "Not authenticated."
ERROR_INVALID_CREDENTIALS = "Invalid email or password."
ERROR_EMAIL_TAKEN = "Email is already in use."
ERROR_USER_NOT_FOUND = "User not found."
ERROR_PRODUCT_NOT_FOUND = "Product not found."
ERROR_CANNOT_ADD_TO_CART = "Could not add the product to the cart."
ERROR_CANNOT_UPDATE_CART_ITEM = "Could not update the cart item."
ERROR_CART_TARGET_REQUIRED = "Either productId or clear=true is required."
ERROR_NOT_ENOUGH_STOCK = "Not enough stock. Available: {available_quantity}."
ERROR_CANNOT_ADD_TO_WISHLIST = "Could not add the product to the wishlist."
ERROR_ITEM_NOT_IN_WISHLIST = "Could not remove the product from the wishlist."
ERROR_INTERNAL = "Internal Server Error"

# Success
SUCCESS_ADDED_TO_CART = "Item added to cart."
SUCCESS_CART_ITEM_UPDATED = "Item updated in cart."
SUCCESS_ITEM_REMOVED_FROM_CART = "Item removed from cart."
SUCCESS_CART_CLEARED = "Cart emptied."
FAILURE_ITEM_NOT_REMOVED_FROM_CART = "Could not remove the item from the cart."
FAILURE_CART_NOT_CLEARED = "Could not empty the cart."
SUCCESS_ADDED_TO_WISHLIST = "Item added to wishlist."
SUCCESS_REMOVED_FROM_WISHLIST = "Item removed from wishlist."
