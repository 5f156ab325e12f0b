#!/usr/bin/env python3
"""
Example script demonstrating how to send host metrics and events to
Stackdriver with the client library.
"""
import time

import psutil

from stackdriver import StackdriverClient, StackdriverError


def collect_system_metrics(gateway_message):
    """Collect basic system metrics into a gateway message."""
    now = gateway_message.timestamp

    cpu_percent = psutil.cpu_percent(interval=1)
    gateway_message.custom_metric('cpu_usage', cpu_percent, now)
    print(f"Collected CPU usage: {cpu_percent}%")

    memory_percent = psutil.virtual_memory().percent
    gateway_message.custom_metric('memory_usage', memory_percent, now)
    print(f"Collected memory usage: {memory_percent}%")

    disk_percent = psutil.disk_usage('/').percent
    gateway_message.custom_metric('disk_usage', disk_percent, now)
    print(f"Collected disk usage: {disk_percent}%")


def main():
    """Main function to run the example."""
    print("Starting metrics collection example...")

    with StackdriverClient() as client:
        client.deploy_event('example-revision', deployed_by='example_usage.py', deployed_to='development')

        # Collect metrics every 5 seconds for 1 minute
        for _ in range(12):
            gateway_message = client.new_gateway_message()
            collect_system_metrics(gateway_message)
            try:
                client.send(gateway_message)
            except StackdriverError as e:
                print(f"Error sending metrics: {e}")

            time.sleep(5)

        client.annotation_event('Metrics collection example completed.', annotated_by='example_usage.py')

    print("Metrics collection example completed.")


if __name__ == "__main__":
    main()
