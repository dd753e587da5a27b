"""
Message formatter - every text the bot sends to a user
"""
from typing import Dict, List, Any

from models.catalog import Category
from models.cart import CartLine
from models.order import Order
from core.config import Settings
from .quantity_parser import format_number

GENERIC_ERROR = '⚠️ Something went wrong. Please try again or type "help".'


class MessageFormatter:
    # Renders menus, carts and receipts with the store details from settings

    def __init__(self, settings: Settings):
        self.settings = settings

    def money(self, amount) -> str:
        return f"{self.settings.currency_symbol}{amount}"

    def catalog_unavailable(self) -> str:
        return "❌ Catalog not available\n\nPlease try again later or contact support."

    def categories_menu(self, categories: List[Category]) -> str:
        if not categories:
            return self.catalog_unavailable()

        menu = f"🛒 *Welcome to {self.settings.store_name} Grocery Store!*\n\n"
        menu += "📋 *Select a Category:*\n\n"
        for category in categories:
            menu += f"{category.key}️⃣ {category.name}\n"

        menu += "\n💡 *How to order:*\n"
        menu += f"• Type category number (1-{len(categories)})\n"
        menu += "• Select items with quantity\n"
        menu += "• Review and confirm order\n\n"
        menu += "Type *help* for more commands"
        return menu

    def already_at_menu(self, categories: List[Category]) -> str:
        if not categories:
            return self.catalog_unavailable()
        return "🔙 You're already at the main menu!\n\n" + self.categories_menu(categories)

    def not_understood(self, categories: List[Category]) -> str:
        if not categories:
            return self.catalog_unavailable()
        return "❓ I didn't understand that.\n\n" + self.categories_menu(categories)

    def category_items(self, category: Category) -> str:
        if not category.items:
            return '❌ No items available in this category\n\nType "back" to return to categories.'

        text = f"{category.emoji} *{category.name}*\n\n"
        text += "📦 *Available Items:*\n\n"
        for index, item in enumerate(category.items, start=1):
            text += f"{index}. {item.name}\n"
            text += f"   💰 {self.money(format_number(item.price))}/{item.unit}\n\n"

        first = category.items[0].name
        text += "📝 *How to add items:*\n\n"
        text += "*Single item:*\n"
        text += f'• "1 2" = 2x {first}\n'
        text += f'• "1 500g" = 500g {first}\n\n'
        text += "*Multiple items:*\n"
        text += '• "1 2, 3 1" = item 1 (qty 2) + item 3 (qty 1)\n'
        text += '• "1 500g, 2 2, 5 1kg" = mixed quantities\n\n'
        text += "*Supported units:* kg, g, l, ml\n\n"
        text += '🔙 Type "back" to return to categories\n'
        text += '🛒 Type "cart" to view your cart'
        return text

    def cart(self, details: Dict[str, Any], category_count: int) -> str:
        if details["empty"]:
            return f"🛒 *Your Cart is Empty*\n\nType a category number (1-{category_count}) to start shopping!"

        text = "🛒 *Your Shopping Cart*\n\n"
        for index, line in enumerate(details["cart_items"], start=1):
            text += f"{index}. {line['name']}\n"
            text += f"   Qty: {line['display']}\n"
            text += f"   Price: {self.money(line['line_total'])}\n\n"

        text += f"💰 *Total: {self.money(details['summary']['total_amount'])}*\n\n"
        text += '✅ Type "confirm" to place order\n'
        text += '🗑️ Type "clear" to empty cart\n'
        text += '🔙 Type "back" to continue shopping'
        return text

    def cart_cleared(self) -> str:
        return '🗑️ *Cart Cleared*\n\nType "start" to begin shopping again!'

    def items_added(self, category: Category, added: List[CartLine], errors: List[str], cart_total: int) -> str:
        text = "✅ *Added to Cart*\n\n"
        if len(added) == 1:
            line = added[0]
            text += f"{category.emoji} {line.name}\n"
            text += f"Quantity: {line.display}\n"
            text += f"Price: {self.money(line.line_total)}\n\n"
        else:
            text += f"{category.emoji} *{len(added)} items added:*\n\n"
            for index, line in enumerate(added, start=1):
                text += f"{index}. {line.name}\n"
                text += f"   Qty: {line.display}\n"
                text += f"   Price: {self.money(line.line_total)}\n\n"

        text += f"🛒 Cart Total: {self.money(cart_total)}\n\n"

        if errors:
            text += "⚠️ *Some items couldn't be added:*\n"
            for error in errors:
                text += f"• {error}\n"
            text += "\n"

        text += "Continue shopping or type:\n"
        text += '• "cart" to view full cart\n'
        text += '• "back" for categories\n'
        text += '• "confirm" to place order'
        return text

    def items_rejected(self, category: Category, errors: List[str]) -> str:
        text = "❌ *Unable to add items*\n\n"
        for error in errors:
            text += f"• {error}\n"
        text += "\n💡 *Correct formats:*\n"
        text += '• Single item: "1 2" (item 1, qty 2)\n'
        text += '• Multiple items: "1 2, 3 1, 5 3"\n'
        text += '• Custom quantity: "1 500g" or "2 2.5kg"\n'
        text += '• Mixed: "1 2, 3 500g, 5 1.5kg"\n\n'
        text += f"📋 Available items: 1-{len(category.items)}"
        return text

    def help(self) -> str:
        text = "🤖 *Grocery Bot Commands*\n\n"
        text += "🛒 *Shopping:*\n"
        text += "• start/menu - Show categories\n"
        text += "• cart - View your cart\n"
        text += "• confirm - Place order\n"
        text += "• clear - Empty cart\n\n"
        text += "📦 *Adding Items:*\n"
        text += '• Single: "1 2" (item 1, qty 2)\n'
        text += '• Multiple: "1 2, 3 1, 5 3"\n'
        text += '• Custom qty: "1 500g" or "2 2.5kg"\n\n'
        text += "📞 *Support:*\n"
        text += "• help - Show this menu\n"
        text += "• contact - Store contact info\n\n"
        text += "Ready to help you shop! 🎉"
        return text

    def contact(self) -> str:
        s = self.settings
        text = f"📞 *{s.store_name} Contact Info*\n\n"
        text += f"🏪 Store: {s.store_name} Grocery\n"
        text += f"📍 Address: {s.store_address}\n"
        text += f"⏰ Timing: {s.store_hours}\n"
        text += f"📱 Phone: {s.store_phone}\n\n"
        text += f"🚚 Free delivery above {self.money(s.free_delivery_above)}!"
        return text

    def empty_cart_on_confirm(self) -> str:
        return '🛒 Your cart is empty!\n\nType "start" to begin shopping.'

    def order_confirmed(self, order: Order) -> str:
        text = "✅ *Order Confirmed!*\n\n"
        text += f"📋 Order ID: {order.order_id}\n"
        text += f"💰 Total: {self.money(order.total_amount)}\n\n"
        text += "📦 *Your Items:*\n"
        for line in order.snapshot.lines:
            text += f"• {line.name} x{line.display}\n"
        text += "\n🚚 We'll deliver within 1-2 hours!\n"
        text += f"📞 Contact: {self.settings.store_phone}\n\n"
        text += f"Thank you for shopping with {self.settings.store_name}! 🎉"
        return text

    def new_order_notification(self, order: Order) -> str:
        text = "🆕 *NEW ORDER RECEIVED*\n\n"
        text += f"📋 Order ID: {order.order_id}\n"
        text += f"👤 Customer: {order.customer_name}\n"
        text += f"📞 Phone: {order.customer_phone}\n"
        text += f"💰 Amount: {self.money(order.total_amount)}\n\n"
        text += f"📦 Items:\n{order.items_summary}"
        return text

    def generic_error(self) -> str:
        return GENERIC_ERROR
