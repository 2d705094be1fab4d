"""
Parser for chart parts to pull out their cached text and values.
"""

from ..utils.xml_utils import qn


def parse_chart_values(root):
    """
    Collects the cached values (<c:v>) of a chart: title, series names,
    category labels and data points, in document order.

    Args:
        root: Root element of a chart part

    Returns:
        list[str]: Non-blank values
    """
    values = []
    for v_elem in root.iter(qn('c:v')):
        if v_elem.text and v_elem.text.strip():
            values.append(v_elem.text)
    return values
