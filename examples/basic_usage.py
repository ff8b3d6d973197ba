"""
Basic usage examples for the Beebotte Python SDK.

Prerequisites:
- Install: `pip install beebotte` (or run from repo root)
- Set credentials: BEEBOTTE_API_KEY and BEEBOTTE_SECRET_KEY
"""
import logging
import time

from beebotte import BBT, BeebotteError, Settings


def main():
    logging.basicConfig(level=logging.DEBUG)

    # Initialize client
    bbt = BBT.from_settings(Settings.from_env())

    print("=" * 60)
    print("Beebotte Python SDK - Basic Usage Examples")
    print("=" * 60)

    # Example 1: Persist a value
    print("\n1. Writing a temperature reading...")
    temperature = bbt.resource("dev", "temperature")
    temperature.write(21.5, ts=int(time.time() * 1000))

    # Example 2: Read it back
    print("\n2. Reading recent values...")
    records = temperature.read(limit=5)
    for record in records:
        print(f"  - {record.get('ts')}: {record.get('data')}")

    df = temperature.read_dataframe(source="hour-stats", time_range="1day")
    if not df.empty:
        print(f"\nHourly statistics over the last day: {len(df)} rows")

    # Example 3: Bulk write and transient publish
    print("\n3. Bulk write and publish...")
    bbt.write_bulk("dev", [
        {"resource": "temperature", "data": 22.0},
        {"resource": "humidity", "data": 48},
    ])
    bbt.publish("dev", "alarm", {"level": "warning"})

    # Example 4: Token for a real-time subscriber
    print("\n4. Signing a subscription...")
    token = bbt.compute_subscription_token("session-id", "private:dev", "alarm", ttl=3600, read=True)
    print(f"Token: {token}")

    # Example 5: Typed errors
    print("\n5. Handling errors...")
    try:
        bbt.read("no-such-channel", "temperature")
    except BeebotteError as e:
        print(f"{e.kind.name}: {e.message}")

    print("\n" + "=" * 60)
    print("Examples completed!")
    print("=" * 60)


if __name__ == "__main__":
    main()
