import threading

# Simple in-memory storage for metrics, gone on restart like the view counts.
# Endpoints run on a thread pool, so updates go through a lock.
_counters = {}
_lock = threading.Lock()


def inc(name, labels):
    """
    Increments a counter.
    Example: name="badge_renders_total", labels={"fill_mode": "random"}
    """
    # Prometheus label string: 'fill_mode="random"'
    label_str = ",".join(f'{k}="{v}"' for k, v in sorted(labels.items()))
    key = f"{name}{{{label_str}}}"

    with _lock:
        _counters[key] = _counters.get(key, 0) + 1


def reset():
    with _lock:
        _counters.clear()


def generate_text():
    """Returns the metrics in Prometheus text format."""
    with _lock:
        items = sorted(_counters.items())
    return "\n".join(f"{key} {count}" for key, count in items)
