"""
Terminal channel for trying the bot as a single customer
"""
from core.order_bot import GroceryOrderBot
from models.message import InboundMessage


class ConsoleOrderUI:
    """Reads utterances from stdin and prints the bot's replies"""

    def __init__(self, order_bot: GroceryOrderBot, sender_id: str = "console@c.us",
                 sender_name: str = "Console Customer"):
        self.bot = order_bot
        self.sender_id = sender_id
        self.sender_name = sender_name

    def run(self):
        """Run the console order loop"""
        print(f"🛒 {self.bot.settings.store_name} order bot (console)")
        print("Type 'start' to see categories, 'quit' to exit")

        while True:
            try:
                user_input = input("\nYou: ").strip()
            except (EOFError, KeyboardInterrupt):
                print()
                break

            if user_input in ["quit", "exit"]:
                print("Thank you for shopping with us!")
                break

            if not user_input:
                continue

            self.bot.handle_message(InboundMessage(
                sender_id=self.sender_id,
                text=user_input,
                sender_name=self.sender_name
            ))
