from typing import Dict, Iterable, List, Tuple, Union

HeaderValue = Union[str, List[str]]


def header_bag(raw_headers: Iterable[Tuple[bytes, bytes]]) -> Dict[str, HeaderValue]:
    """Build an ordered name -> value(s) mapping from raw ASGI headers.

    Names are lower-cased. A name seen more than once maps to the list of
    its values in arrival order; the first occurrence keeps its position.
    """
    bag: Dict[str, HeaderValue] = {}
    for raw_name, raw_value in raw_headers:
        name = raw_name.decode("latin-1").lower()
        value = raw_value.decode("latin-1")
        if name not in bag:
            bag[name] = value
            continue
        current = bag[name]
        if isinstance(current, list):
            current.append(value)
        else:
            bag[name] = [current, value]
    return bag
