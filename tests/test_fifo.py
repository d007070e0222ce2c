from leetkit.fifo import Queue


def test_queue_sequence():
    q = Queue()

    q.enqueue(1)
    assert q.is_empty() is False
    assert len(q) == 1

    q.enqueue(2)
    assert len(q) == 2

    assert q.dequeue() == 1
    assert len(q) == 1

    assert q.dequeue() == 2
    assert q.is_empty() is True


def test_dequeue_empty_returns_none():
    q = Queue()
    assert q.dequeue() is None
    assert len(q) == 0


def test_fifo_order_preserved():
    q = Queue()
    values = ["a", "b", "c", "d"]
    for v in values:
        q.enqueue(v)
    out = []
    while not q.is_empty():
        out.append(q.dequeue())
    assert out == values