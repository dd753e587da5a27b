"""
Main entry point for the grocery order bot
"""
import logging
import os
import sys

from core.config import load_settings
from core.order_bot import GroceryOrderBot
from services.messaging import ConsoleReplySender
from ui.console_ui import ConsoleOrderUI


def main():
    # Let the operator pick a channel
    settings = load_settings()
    logging.basicConfig(level=settings.log_level,
                        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s")

    print("=== Grocery Order Bot ===")
    print("1. Console ordering")
    print("2. Webhook server")
    print("3. Exit")

    while True:
        choice = input("\nSelect (1-3): ").strip()

        if choice == "1":
            bot = GroceryOrderBot(settings, reply_sender=ConsoleReplySender())
            ConsoleOrderUI(bot).run()
            break

        elif choice == "2":
            from app import create_app
            create_app().run(host='0.0.0.0', port=int(os.getenv('PORT', 5000)))
            break

        elif choice == "3":
            print("Bye.")
            sys.exit(0)

        else:
            print("Invalid choice, pick 1-3.")


if __name__ == "__main__":
    main()
