from __future__ import annotations

import json

from notify_registry import DeliveryError, NotificationRegistry, RegistrySettings
from notify_registry.utils.logger import setup_logger


def main():
    settings = RegistrySettings.from_env()
    setup_logger(level=settings.log_level)
    registry = NotificationRegistry(settings)
    handles = {}

    print("Stock ticker ready. Type /quit to exit. Examples:")
    print("  /sub A            subscribe watcher A to 'stock'")
    print("  /unsub A          remove watcher A")
    print("  /fail F           subscribe a watcher that always raises")
    print("  {\"price\": 100}    publish a payload to 'stock'")

    while True:
        user_input = input("you> ").strip()
        if user_input.lower() in {"/quit", "quit", "exit"}:
            break

        if user_input.startswith("/sub "):
            name = user_input[5:].strip()
            handles[name] = registry.subscribe("stock", lambda p, name=name: print(f"  {name} got {p}"))
        elif user_input.startswith("/fail "):
            name = user_input[6:].strip()

            def broken(payload, name=name):
                raise RuntimeError(f"{name} cannot handle {payload}")

            handles[name] = registry.subscribe("stock", broken)
        elif user_input.startswith("/unsub "):
            registry.unsubscribe(handles.pop(user_input[7:].strip(), None))
        else:
            try:
                registry.publish("stock", json.loads(user_input))
            except json.JSONDecodeError as exc:
                print(f"Error: {exc}")
            except DeliveryError as exc:
                print(f"Error: {exc}")
        print("subscribers:", registry.subscriber_count("stock"))


if __name__ == "__main__":
    main()
