"""Keep document revisions in an IndexedStore.

Revision numbers are store indices, so a revision number stays valid after
older or rejected revisions are dropped.
"""

from dataclasses import dataclass

from indexstore import IndexedStore


@dataclass
class Revision:
    author: str
    text: str


def main() -> None:
    history: IndexedStore[Revision] = IndexedStore()

    history.push(Revision("ana", "Initial draft"))
    reviewed = history.push(Revision("bo", "Reviewed draft"))
    rejected = history.push(Revision("cy", "Spam"))

    history.remove(rejected)
    print(f"Current revision: {history.last()}")
    print(f"Revision {reviewed} is still {history[reviewed]}")

    # A new revision never takes over the rejected number
    latest = history.push(Revision("ana", "Final"))
    print(f"New revision number: {latest} (rejected was {rejected})")

    print(history)


if __name__ == "__main__":
    main()
