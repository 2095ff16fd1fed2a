import time

from pagination import compute_page_sequence, item_range


def render_footer(context, width):
    """
    context keys: status_msg, status_until, current_page, total_pages,
                   total_items, page_size, selected_count
    """
    now = time.time()
    if context.get('status_msg') and now < context.get('status_until', 0):
        text = f" {context['status_msg']}"
        return text.ljust(width)[:width]

    parts = []
    selected = context.get('selected_count', 0)
    if selected:
        parts.append(f"{selected} selected")

    current = context.get('current_page', 1)
    total_pages = context.get('total_pages', 1)
    total_items = context.get('total_items')
    page_size = context.get('page_size')
    if total_items is not None and page_size:
        start, end = item_range(current, page_size, total_items)
        parts.append(f"{start}–{end} of {total_items}")
    else:
        parts.append(f"Page {current} of {total_pages}")

    window = []
    for page in compute_page_sequence(current, total_pages):
        if page == current:
            window.append(f"[{page}]")
        else:
            window.append(str(page))
    parts.append(" ".join(window))

    text = " " + " | ".join(parts)
    return text.ljust(width)[:width]
