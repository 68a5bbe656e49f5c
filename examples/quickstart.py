"""
editsim — Quick-start examples with dummy data.

Run:  python examples/quickstart.py
"""

from __future__ import annotations


def divider(title: str) -> None:
    print(f"\n{'=' * 60}")
    print(f"  {title}")
    print(f"{'=' * 60}\n")


# ──────────────────────────────────────────────────────────────
# 1. Pairwise metrics  (editsim)
# ──────────────────────────────────────────────────────────────

def example_pairwise() -> None:
    divider("1 · Pairwise Metrics (editsim)")

    import editsim

    pairs = [
        ("kitten", "sitting"),
        ("specter", "spectre"),
        ("ca", "abc"),
        ("cheeseburger", "cheese fries"),
        ("Friedrich Nietzsche", "Jean-Paul Sartre"),
    ]

    for s1, s2 in pairs:
        print(f'  levenshtein("{s1}", "{s2}")  = {editsim.levenshtein(s1, s2)}')
        print(f"  osa_distance                  = {editsim.osa_distance(s1, s2)}")
        print(f"  damerau_levenshtein           = {editsim.damerau_levenshtein(s1, s2)}")
        print(f"  normalized_levenshtein        = {editsim.normalized_levenshtein(s1, s2):.3f}")
        print(f"  jaro                          = {editsim.jaro(s1, s2):.3f}")
        print(f"  jaro_winkler                  = {editsim.jaro_winkler(s1, s2):.3f}")
        print()

    try:
        editsim.hamming("ab", "abc")
    except editsim.LengthMismatchError as e:
        print(f"  hamming('ab', 'abc') -> {e} (len1={e.len1}, len2={e.len2})")


# ──────────────────────────────────────────────────────────────
# 2. Batch scoring  (editsim.process)
# ──────────────────────────────────────────────────────────────

def example_process() -> None:
    divider("2 · Batch Scoring (editsim.process)")

    import editsim
    from editsim import process
    from editsim.distance import Levenshtein

    products = [
        "Apple iPhone 15 Pro Max",
        "Samsung Galaxy S24 Ultra",
        "Google Pixel 8 Pro",
        "OnePlus 12",
        "Apple iPad Air M2",
        "Samsung Galaxy Tab S9",
    ]

    query = "apple iphone pro"
    print(f"  jaro_winkler_against_collection({query!r}):")
    for product, score in zip(products, editsim.jaro_winkler_against_collection(query, products)):
        print(f"    {score:.3f}  {product}")

    print()
    print("  extract (normalized Levenshtein, lowercased):")
    for choice, score, idx in process.extract(
        query,
        products,
        scorer=Levenshtein.normalized_similarity,
        processor=editsim.utils.default_process,
        limit=3,
    ):
        print(f"    [{idx}] {score:.3f}  {choice}")


if __name__ == "__main__":
    example_pairwise()
    example_process()
