def bytes_to_kb(n: int) -> float:
    return n / 1024

def human_bytes(n: int) -> str:
    if n < 1024:
        return f"{n} B"
    if n < 1024 * 1024:
        return f"{bytes_to_kb(n):.1f} KB"
    return f"{bytes_to_kb(n) / 1024:.1f} MB"
