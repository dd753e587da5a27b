"""
Tests for the Flask webhook channel
"""
import threading
import unittest
import tempfile
import shutil

from app import create_app
from core.order_bot import GroceryOrderBot
from services.messaging import CollectingReplySender
from bot_fixtures import seeded_settings, make_settings


class TestWebhookApp(unittest.TestCase):
    """Test cases for the webhook endpoints"""

    def setUp(self):
        self.workdir = tempfile.mkdtemp()
        settings = seeded_settings(self.workdir, shopkeeper_id="shop@c.us")
        self.bot = GroceryOrderBot(settings, reply_sender=CollectingReplySender())
        self.app = create_app(self.bot)
        self.client = self.app.test_client()

    def tearDown(self):
        shutil.rmtree(self.workdir, ignore_errors=True)

    def post(self, text, msg_type="text", sender="919876543210@c.us"):
        return self.client.post('/api/messages', json={
            'senderId': sender,
            'senderName': 'Asha',
            'text': text,
            'type': msg_type
        })

    def test_message_gets_reply(self):
        response = self.post("start")

        self.assertEqual(response.status_code, 200)
        replies = response.get_json()["replies"]
        self.assertEqual(len(replies), 1)
        self.assertIn("Select a Category", replies[0])

    def test_concurrent_requests_from_one_sender_keep_their_replies(self):
        """Test that each request answers with its own reply"""
        texts = ["help", "contact"] * 10
        results = {}

        def send(index, text):
            client = self.app.test_client()
            response = client.post('/api/messages', json={
                'senderId': 'u1', 'text': text, 'type': 'text'
            })
            results[index] = response.get_json()["replies"]

        threads = [threading.Thread(target=send, args=(i, text)) for i, text in enumerate(texts)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        for index, text in enumerate(texts):
            replies = results[index]
            self.assertEqual(len(replies), 1)
            expected = "Grocery Bot Commands" if text == "help" else "Contact Info"
            self.assertIn(expected, replies[0])
        self.assertEqual(self.bot.reply_sender.drain('u1'), [])

    def test_non_text_message_has_no_reply(self):
        response = self.post("start", msg_type="sticker")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.get_json(), {"replies": []})

    def test_missing_sender_is_rejected(self):
        response = self.client.post('/api/messages', json={'text': 'start'})

        self.assertEqual(response.status_code, 400)

    def test_order_notifies_shopkeeper_outbox(self):
        self.post("2")
        self.post("1 2")
        confirm = self.post("confirm").get_json()["replies"][0]
        self.assertIn("Order Confirmed", confirm)

        outbox = self.client.get('/api/outbox/shop@c.us').get_json()["replies"]
        self.assertEqual(len(outbox), 1)
        self.assertIn("NEW ORDER RECEIVED", outbox[0])
        self.assertEqual(self.client.get('/api/outbox/shop@c.us').get_json()["replies"], [])

    def test_health(self):
        status = self.client.get('/health').get_json()

        self.assertEqual(status["status"], "ok")
        self.assertEqual(status["categories"], 5)
        self.assertEqual(status["items"], 25)

    def test_health_degraded(self):
        bot = GroceryOrderBot(make_settings(tempfile.mkdtemp(dir=self.workdir)),
                              reply_sender=CollectingReplySender())
        status = create_app(bot).test_client().get('/health').get_json()

        self.assertEqual(status["status"], "degraded")


if __name__ == '__main__':
    unittest.main()
