"""
Debug Event Logging

Prints every event a layout pass publishes. Enabled by setting
BOXLAYOUT_DEBUG in the environment, or explicitly via enable_debug_events().
"""

from __future__ import annotations
import time

from pubsub import pub


def debug_event_logger(topic=pub.AUTO_TOPIC, **kwargs):
    """Log all events published on the event bus."""
    timestamp = time.strftime("%H:%M:%S")
    topic_name = topic.getName()
    data_str = ", ".join(f"{k}={v}" for k, v in kwargs.items() if k != "topic")
    print(f"[{timestamp}] EVENT: {topic_name} | {data_str}")


def enable_debug_events(bus=pub):
    """Subscribe the debug logger to every topic on ``bus``."""
    bus.subscribe(debug_event_logger, pub.ALL_TOPICS)


def disable_debug_events(bus=pub):
    bus.unsubscribe(debug_event_logger, pub.ALL_TOPICS)
