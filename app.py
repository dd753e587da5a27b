import logging
import os
from typing import Optional

from flask import Flask, request, jsonify

from core.config import load_settings
from core.order_bot import GroceryOrderBot
from models.message import InboundMessage
from services.messaging import CollectingReplySender


def configure_logging(level_name: str):
    level = getattr(logging, level_name, logging.INFO)
    if not logging.getLogger().handlers:
        logging.basicConfig(
            level=level,
            format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        )


def create_app(bot: Optional[GroceryOrderBot] = None) -> Flask:
    """Build the webhook app; notifications for other recipients are collected per recipient"""
    if bot is None:
        settings = load_settings()
        configure_logging(settings.log_level)
        bot = GroceryOrderBot(settings, reply_sender=CollectingReplySender())
        bot.catalog_service.ensure_loaded()

    app = Flask(__name__)

    @app.route('/api/messages', methods=['POST'])
    def messages():
        """Handle one inbound channel message"""
        data = request.get_json(silent=True)
        if not isinstance(data, dict) or not data.get('senderId'):
            return jsonify({'error': 'senderId is required'}), 400

        message = InboundMessage.from_dict(data)
        # The reply goes back in the response; the outbox only holds other recipients
        reply = bot.handle_message(message, deliver=False)
        return jsonify({'replies': [reply] if reply else []})

    @app.route('/api/outbox/<recipient_id>', methods=['GET'])
    def outbox(recipient_id):
        """Pending messages for a recipient such as the shopkeeper"""
        return jsonify({'replies': bot.reply_sender.drain(recipient_id)})

    @app.route('/health')
    def health():
        """Health check endpoint with catalog status"""
        status = bot.get_status()
        status['status'] = 'ok' if status['available'] else 'degraded'
        return jsonify(status)

    return app


if __name__ == '__main__':
    app = create_app()
    port = int(os.getenv('PORT', 5000))
    debug = os.getenv('DEBUG', 'False').lower() == 'true'

    print("=== Grocery Order Bot Server ===")
    print(f"Starting server on http://localhost:{port}")
    print("Press Ctrl+C to stop")

    app.run(
        host='0.0.0.0',
        port=port,
        debug=debug
    )
