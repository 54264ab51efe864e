def uri_join(path: str, *other_paths: str) -> str:
    if len(other_paths) == 0:
        return path

    first_path = path
    if first_path.endswith("/"):
        first_path = first_path[:-1]

    last_path = other_paths[-1]
    if last_path.startswith("/"):
        last_path = last_path[1:]

    middle_paths = []
    for other_path in other_paths[:-1]:
        if other_path.startswith("/"):
            other_path = other_path[1:]
        if other_path.endswith("/"):
            other_path = other_path[:-1]
        middle_paths.append(other_path)

    return "/".join([first_path, *middle_paths, last_path])


def join_url(base: str, path: str) -> str:
    """Always ``base + "/" + path``, whatever slashes either side carries"""
    return uri_join(base.rstrip("/"), path.lstrip("/"))
