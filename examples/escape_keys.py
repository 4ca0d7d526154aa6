"""Example: Escape a few application keys into storage-safe document ids.

This script demonstrates minimal usage of the keyescape library.
"""

from keyescape import describe_key, escape_key

if __name__ == "__main__":
    # Keys as an application might build them, some with forbidden characters
    keys = [
        "user/42/conversation#7",
        "C:\\temp\\state?x=1",
        "plain-key",
        "a" * 300,
    ]

    # Print each key next to the document id it maps to
    for key in keys:
        print(f"{key[:40]!r} -> {escape_key(key)!r}")

    # Details of a single transformation
    print()
    print(describe_key("tenant/α/β", key_suffix="-prod"))
