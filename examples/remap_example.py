"""Reshape flat records into a nested layout with remap_collection."""

from path_dict.accessor import delete_paths, map_leaves, remap_collection


def main() -> None:
    """Remap a list of flat records and clean the result."""
    records = [
        {"first": " jane ", "last": "doe", "password": "x"},
        {"first": "john", "last": " smith", "password": "y"},
    ]
    path_map = {"first": "name.first", "last": "name.last", "password": "secret.password", "email": "contact.email"}

    remapped = remap_collection(records, path_map)
    for record in remapped:
        delete_paths(record, ["secret"])
    print("remapped:", remapped)

    cleaned = [map_leaves([str.strip, str.title], record["name"]) for record in remapped]
    print("names:", cleaned)


if __name__ == "__main__":
    main()
