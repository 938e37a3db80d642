# utils/filter_util.py
def matches(outage, filter_text):
    needle = filter_text.lower()
    return needle in outage.location.lower() or needle in outage.street.lower()


def filter_outages(outages, filter_text=None):
    """
    Keep outages whose location or street contains filter_text (case-insensitive).
    No filter returns every outage, in the original order.
    """
    if not filter_text:
        return list(outages)
    return [o for o in outages if matches(o, filter_text)]
