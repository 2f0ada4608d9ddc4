def next_slide(current: int, count: int) -> int:
    if count <= 0:
        return 0
    return (current + 1) % count

def previous_slide(current: int, count: int) -> int:
    if count <= 0:
        return 0
    return (current - 1 + count) % count
