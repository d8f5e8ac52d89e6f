from typing import Iterable, List


def merge_images(
    current: Iterable[str],
    remove: Iterable[str] = (),
    add: Iterable[str] = (),
) -> List[str]:
    """
    Compute the next image list of a listing.

    Surviving images keep their original order, newly uploaded ones are appended
    in upload order. URLs in ``remove`` that are not part of ``current`` are ignored.
    """
    removal = set(remove)
    return [url for url in current if url not in removal] + list(add)
