from asimpy import Environment
from consumer import Consumer
from producer import Producer
from two_stack_queue import TwoStackQueue


# mccole: simulate
def run_simulation():
    """Run producers and a consumer over one two-stack queue."""
    env = Environment()
    queue = TwoStackQueue()

    # Two producers feeding the same queue
    orders = Producer(env, queue, "Orders", interval=1.0)
    refunds = Producer(env, queue, "Refunds", interval=2.5, limit=5)

    # One consumer that is slightly slower than the combined producers
    consumer = Consumer(env, queue, "Worker", poll_interval=0.5, processing_time=0.8)

    # Run simulation
    env.run(until=20)

    # Print statistics
    consumed = len(consumer.consumed)
    print("\n=== Statistics ===")
    print(f"Items produced: {orders.items_produced + refunds.items_produced}")
    print(f"Items consumed: {consumed}")
    print(f"Items remaining: {queue.length()}")
    print(f"Empty polls: {consumer.empty_polls}")
    print(f"Average latency: {consumer.average_latency():.2f}")
    print(f"Elements moved: {queue.moves}")
    print(f"Moves per consumed item: {queue.moves / max(consumed, 1):.2f}")
# mccole: /simulate


if __name__ == "__main__":
    run_simulation()
