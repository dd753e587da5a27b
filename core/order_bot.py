"""
Main GroceryOrderBot class - conversation state machine over all services
"""
import logging
from typing import Dict, Any, Optional, Callable

from models.command import Command, CommandType
from models.message import InboundMessage
from models.session import SessionState
from database.connection import DatabaseConnection
from database.repository import CatalogRepository, OrderRepository
from services.catalog_service import CatalogService
from services.cart_service import CartService
from services.line_item_parser import LineItemParser
from services.order_service import OrderService
from services.persistence import OrderPersistence, DatabaseOrderSink, BackupFileSink
from services.notification import OrderNotifier
from services.messaging import ReplySender, CollectingReplySender, safe_send
from services.formatter import MessageFormatter
from .commands import parse_command
from .config import Settings, load_settings
from .state_store import UserState, UserStateStore

logger = logging.getLogger(__name__)


class GroceryOrderBot:
    # Owns the per-user state store and routes each utterance to a handler

    def __init__(self, settings: Optional[Settings] = None,
                 reply_sender: Optional[ReplySender] = None,
                 catalog_service: Optional[CatalogService] = None,
                 persistence: Optional[OrderPersistence] = None,
                 notifier: Optional[OrderNotifier] = None):
        self.settings = settings or load_settings()
        self.reply_sender = reply_sender or CollectingReplySender()

        # Repository layer
        self.db_connection = DatabaseConnection(self.settings.db_path)
        self.catalog_repo = CatalogRepository(self.db_connection)
        self.order_repo = OrderRepository(self.db_connection)

        # Service layer
        self.formatter = MessageFormatter(self.settings)
        self.catalog_service = catalog_service or CatalogService(self.catalog_repo)
        self.cart_service = CartService()
        self.line_item_parser = LineItemParser(self.cart_service)
        self.persistence = persistence or OrderPersistence(
            DatabaseOrderSink(self.order_repo),
            BackupFileSink(self.settings.orders_backup_path),
            attempts=self.settings.order_persist_attempts
        )
        self.notifier = notifier or OrderNotifier(self.reply_sender, self.settings.shopkeeper_id)
        self.order_service = OrderService(
            self.cart_service, self.persistence, self.notifier, self.formatter
        )

        self.store = UserStateStore()
        self._handlers: Dict[CommandType, Callable[[UserState, Command, InboundMessage], str]] = {
            CommandType.MENU: self._show_menu,
            CommandType.HELP: self._show_help,
            CommandType.CONTACT: self._show_contact,
            CommandType.CART: self._show_cart,
            CommandType.CLEAR: self._clear_cart,
            CommandType.BACK: self._go_back,
            CommandType.CONFIRM: self._confirm_order,
            CommandType.SELECT_CATEGORY: self._select_category,
            CommandType.FREE_TEXT: self._free_text,
        }

    # === Entry point ===
    def handle_message(self, message: InboundMessage, deliver: bool = True) -> Optional[str]:
        """Process one inbound message end to end and send the reply.

        Non-text and empty messages are ignored and return None. Any error
        inside a handler is logged and answered with a generic apology; the
        user's session stays usable. With deliver=False the reply is only
        returned, for channels that answer the request directly.
        """
        if message.type != "text" or not message.text or not message.sender_id:
            return None

        logger.info("Message from %s: %r", message.sender_id, message.text)

        with self.store.locked(message.sender_id) as state:
            try:
                reply = self.respond(state, message)
            except Exception:
                logger.exception("Error processing message from %s", message.sender_id)
                reply = self.formatter.generic_error()

            if deliver and safe_send(self.reply_sender, message.sender_id, reply):
                logger.info("Response sent to %s", message.sender_id)
        return reply

    def respond(self, state: UserState, message: InboundMessage) -> str:
        self.catalog_service.ensure_loaded()
        command = parse_command(message.text, self.catalog_service.category_keys())
        return self._handlers[command.type](state, command, message)

    # === Global commands ===
    def _show_menu(self, state: UserState, command: Command, message: InboundMessage) -> str:
        state.session.reset()
        return self.formatter.categories_menu(self.catalog_service.categories())

    def _show_help(self, state: UserState, command: Command, message: InboundMessage) -> str:
        return self.formatter.help()

    def _show_contact(self, state: UserState, command: Command, message: InboundMessage) -> str:
        return self.formatter.contact()

    def _show_cart(self, state: UserState, command: Command, message: InboundMessage) -> str:
        details = self.cart_service.get_cart_details(state.cart)
        return self.formatter.cart(details, self.catalog_service.category_count())

    def _clear_cart(self, state: UserState, command: Command, message: InboundMessage) -> str:
        state.discard_cart()
        return self.formatter.cart_cleared()

    def _go_back(self, state: UserState, command: Command, message: InboundMessage) -> str:
        categories = self.catalog_service.categories()
        if state.session.state is SessionState.CATEGORY:
            state.session.reset()
            return self.formatter.categories_menu(categories)
        return self.formatter.already_at_menu(categories)

    def _confirm_order(self, state: UserState, command: Command, message: InboundMessage) -> str:
        result = self.order_service.process_order(state.cart, message.sender_id, message.sender_name)
        if not result["success"]:
            return self.formatter.empty_cart_on_confirm()

        state.discard_cart()
        state.session.reset()
        return self.formatter.order_confirmed(result["order"])

    # === State dependent commands ===
    def _select_category(self, state: UserState, command: Command, message: InboundMessage) -> str:
        if state.session.state is SessionState.CATEGORY:
            # A bare number inside a category is item entry, not navigation
            return self._enter_items(state, command.text)

        category = self.catalog_service.get_category(command.text)
        state.session.enter_category(category.key)
        return self.formatter.category_items(category)

    def _free_text(self, state: UserState, command: Command, message: InboundMessage) -> str:
        if state.session.state is SessionState.CATEGORY:
            return self._enter_items(state, command.text)

        state.session.reset()
        return self.formatter.not_understood(self.catalog_service.categories())

    def _enter_items(self, state: UserState, text: str) -> str:
        category = self.catalog_service.get_category(state.session.active_category_key)
        if category is None:
            state.session.reset()
            return self.formatter.not_understood(self.catalog_service.categories())

        # The cart only comes into existence with its first successful line
        cart = state.cart if state.cart is not None else self.cart_service.new_cart()
        result = self.line_item_parser.parse_line(text, category, cart)

        if not result["added"]:
            return self.formatter.items_rejected(category, result["errors"])

        state.cart = cart
        return self.formatter.items_added(category, result["added"], result["errors"], cart.total)

    # === Helpers for channels and tests ===
    def get_cart_details(self, user_id: str) -> Dict[str, Any]:
        with self.store.locked(user_id) as state:
            return self.cart_service.get_cart_details(state.cart)

    def remove_from_cart(self, user_id: str, item_id: str) -> Dict[str, Any]:
        with self.store.locked(user_id) as state:
            if state.cart is None or self.cart_service.remove(state.cart, item_id) is None:
                return {"success": False, "error": "Item not in cart"}
            return {"success": True, "total_amount": state.cart.total}

    def get_status(self) -> Dict[str, Any]:
        self.catalog_service.ensure_loaded()
        status = self.catalog_service.get_status()
        status["active_users"] = self.store.user_count()
        return status
