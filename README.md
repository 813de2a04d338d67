# embedkit

Small, dependency-free building blocks of the kind found in embedded
firmware, modelled in plain Python so they can be studied, tested and
reused in simulations.

| Module | What it provides |
| --- | --- |
| `embedkit.circular_buffer` | `CircularBuffer`, a fixed-size byte ring that overwrites the oldest byte when full; `BufferEmptyError` |
| `embedkit.state_machine` | `State`, `Event`, `process_event()` and a simulated `Led` |
| `embedkit.linked_list` | `LinkedList`, a lock-guarded singly linked list |
| `embedkit.priority_tasks` | `Task`, `TaskQueue` (highest priority first), `run_producer()`, `run_consumer()` |
| `embedkit.block_pool` | `MemoryPool`, a fixed-block allocator with a LIFO free list; `PoolExhaustedError` |
| `embedkit.blocking_queue` | `BlockingQueue` (condition variables), `SemaphoreQueue` (semaphores), `producer()`, `consumer()`, `main()` |
| `embedkit.id_allocator` | `Allocator`, first-fit allocation of contiguous units tagged by an id |
| `embedkit.packet_pool` | `PacketPool` and `PacketBuffer`, a pool of packet buffers handed out round-robin |
| `embedkit.aligned` | `SimulatedHeap`, `AlignedAllocator`, `MemoryLayout`, `format_layout()`, `main()` |
| `embedkit.event_system` | `EventSystem`, listeners per event type |
| `embedkit.timer_events` | `TimerEventSystem`, one-shot timers on a simulated clock |

## Installation

```
pip install embedkit
```

Python 3.10 or later is required. The package has no runtime dependencies.

## Examples

### Ring buffer

```python
from embedkit.circular_buffer import CircularBuffer

ring = CircularBuffer(5)
for value in range(10):
    ring.write(value)          # the oldest bytes are overwritten
print(len(ring))               # 5
print(ring.is_full())          # True
print(ring.read())             # 5, the oldest byte still held
```

Values must be bytes (0 to 255). Reading from an empty buffer raises
`BufferEmptyError`.

### State machine

```python
from embedkit.state_machine import Event, Led, State, process_event

led = Led()
state = State.OFF
for event in (Event.BUTTON_PRESS, Event.BUTTON_PRESS, Event.TIMER_EXPIRE):
    state = process_event(state, event)
    led.handle_state(state)    # prints "LED is ..." and returns is_on
```

A button press moves OFF to ON to BLINK and back to OFF. A timer expiry
leaves the state unchanged; handling BLINK toggles the LED.

### Priority task queue

```python
from embedkit.priority_tasks import TaskQueue

tasks = TaskQueue()
tasks.push("low", 1)
tasks.push("high", 90)
tasks.push("also-high", 90)
print([task.name for task in tasks])   # ['high', 'also-high', 'low']
print(tasks.pop(timeout=1.0).name)     # 'high'
```

`pop()` waits for a task and raises `TimeoutError` if the timeout runs out.
`run_producer()` and `run_consumer()` push tasks with random priorities in
0..99 and pop them, suitable as thread targets.

### Blocking queues

```python
from embedkit.blocking_queue import BlockingQueue, SemaphoreQueue

queue = BlockingQueue(2)
queue.put("a")
queue.put("b")
print(queue.get())             # 'a'

slots = SemaphoreQueue(10)
slots.produce(42)
print(slots.consume(timeout=1.0))   # 42
```

`put`/`get` and `produce`/`consume` block until room or an item is
available, and raise `TimeoutError` when a given timeout runs out.

### Memory pools

```python
from embedkit.block_pool import MemoryPool
from embedkit.packet_pool import PacketPool

pool = MemoryPool(64, 8)
block = pool.alloc()           # a writable 64-byte memoryview
block[:5] = b"hello"
pool.free(block)               # the next alloc() returns this block again
print(pool.free_count())       # 8

packets = PacketPool(pool_size=4, packet_size=1500)
buffer = packets.get_buffer()
buffer.write("Test packet data")
print(buffer.payload, buffer.length)
packets.release_buffer(buffer)
print(packets.count_free())    # 4
```

Both pools raise `PoolExhaustedError` when no block is free.

### First-fit allocator

```python
from embedkit.id_allocator import Allocator

allocator = Allocator(10)
allocator.allocate(1, 1)       # 0
allocator.allocate(1, 2)       # 1
allocator.allocate(1, 1)       # 2
allocator.free_memory(2)       # 1
allocator.allocate(3, 3)       # 3
allocator.free_memory(1)       # 2
print(allocator)               # [0,0,0,3,3,3,0,0,0,0]
allocator.allocate(10, 4)      # raises MemoryError: no contiguous run is free
```

### Aligned allocation

```python
from embedkit.aligned import AlignedAllocator, format_layout

allocator = AlignedAllocator()
address = allocator.malloc_aligned(100, 16)
print(address % 16)            # 0
print(format_layout(allocator.layout(address, 16)))
allocator.free_aligned(address)
```

The allocator works over a `SimulatedHeap`; the raw address is stored in
the pointer-sized slot just before the aligned block. A size or alignment
that is not positive, or an alignment that is not a power of two, raises
`ValueError`.

### Events and timers

```python
from embedkit.event_system import EVENT_CLICK, EventSystem
from embedkit.timer_events import TimerEventSystem

events = EventSystem()
listener_id = events.add_listener(EVENT_CLICK, lambda data: print("click", data))
events.trigger(EVENT_CLICK, (100, 200))   # returns the number of listeners called
events.remove_listener(EVENT_CLICK, listener_id)

timers = TimerEventSystem()
timers.add_event(5, lambda: print("five"))
timers.add_event(3, lambda: print("three"))
timers.advance_time(10)        # prints "three", then "five"; returns [2, 1]
print(timers.format_state())
```

`EventSystem` calls the most recently added listener first and rejects
event types outside `0..max_event_types - 1` with `ValueError`.
`TimerEventSystem.add_event` rejects times that are not in the future;
`remove_event` raises `KeyError` for an unknown handle.

`embedkit.aligned`, `embedkit.event_system` and `embedkit.timer_events`
report their steps through the standard `logging` module at DEBUG level.

## Command-line demos

Two demonstrations are installed as commands:

```
embedkit-producer-consumer [--count N] [--capacity N] [--producer-delay S] [--consumer-delay S]
embedkit-aligned [--pointer-size {4,8}] [--base ADDRESS]
```

`embedkit-producer-consumer` runs a producer and a consumer thread over a
bounded `BlockingQueue` (defaults: 10 items, capacity 5).
`embedkit-aligned` allocates aligned blocks from a `SimulatedHeap`, prints
their memory layout and shows that bad sizes and alignments are rejected.

## What is not included

There is no manager for named callbacks with priorities, enable/disable
switches and execution statistics. For dispatching callbacks, use
`EventSystem` (per event type) or `TimerEventSystem` (at scheduled times).

## Running the tests

```
pip install embedkit[test]
pytest
```