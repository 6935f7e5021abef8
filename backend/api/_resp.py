def ok(data: dict | list | str | int | float | None = None, **extras):
    payload = {"status": "success"}
    if data is not None:
        payload["data"] = data
    if extras:
        payload.update(extras)
    return payload
