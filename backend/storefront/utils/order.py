def compact_order(items, order_field="order"):
    """
    Re-assigns sequential order values (1..N) to a list of dicts,
    keeping their current relative order.
    """
    items.sort(key=lambda item: item.get(order_field) or 0)

    for index, item in enumerate(items, start=1):
        item[order_field] = index

    return items


def next_order(items, order_field="order"):
    return max((item.get(order_field) or 0 for item in items), default=0) + 1


def apply_order(items, ordered_ids, order_field="order", id_field="id"):
    """
    Assign positions from a list of ids (position = index + 1).
    Items missing from ``ordered_ids`` keep their current value.
    """
    positions = {item_id: index for index, item_id in enumerate(ordered_ids, start=1)}

    for item in items:
        if item.get(id_field) in positions:
            item[order_field] = positions[item[id_field]]

    items.sort(key=lambda item: item.get(order_field) or 0)
    return items
