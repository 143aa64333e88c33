import time


def generate_employee_id(now_ms: int | None = None) -> str:
    stamp = now_ms if now_ms is not None else int(time.time() * 1000)
    return f"EMP{str(stamp)[-6:]}"
