"""Basic usage example for doublylinked."""

from doublylinked import ListIndexError, dll


def main() -> None:
    """Demonstrate basic list operations."""
    print("=== Basic List Example ===\n")

    lst = dll("b", "c")
    lst.push_front("a")
    lst.push_back("d")
    print(f"List: {lst}")
    print(f"Length: {len(lst)}")
    print(f"Forward: {list(lst.iter())}")
    print(f"Backward: {list(lst.iter_rev())}\n")

    # Walk through node views
    print("Walking with views:")
    view = lst.first()
    while view is not None:
        print(f"  {view.value}")
        view = view.next()

    print(f"\nPopped back: {lst.pop_back()}")
    print(f"Popped front: {lst.pop_front()}")
    print(f"Removed at 1: {lst.remove_at(1)}")
    print(f"List: {lst}\n")

    try:
        lst.remove_at(5)
    except ListIndexError as exc:
        print(f"Out of bounds: {exc}")

    while lst:
        lst.pop_front()
    print(f"Pop on empty list: {lst.pop_front()}")


if __name__ == "__main__":
    main()
