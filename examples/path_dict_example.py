"""Minimal example for PathDict over a plain nested dict."""

from path_dict.mappings.path_dict import PathDict


def main() -> None:
    """Run a basic set/get/delete flow through dotted paths."""
    mapping = PathDict()
    mapping["user.alice.age"] = 30
    mapping["user.alice.email"] = "alice@example.com"
    print(f"{mapping=}")
    print("age:", mapping["user.alice.age"])
    print("has email:", "user.alice.email" in mapping)

    del mapping["user.alice.email"]
    print("after delete:", mapping.to_dict())


if __name__ == "__main__":
    main()
