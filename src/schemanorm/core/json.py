import platform
from json import JSONDecodeError as JSONDecodeError

if platform.python_implementation() == "PyPy":
    from json import dumps as _dumps
    from json import loads as loads

    def dumps(obj: object, *, sort_keys: bool = False, indent: bool = False) -> str:
        return _dumps(obj, sort_keys=sort_keys, indent=2 if indent else None)
else:
    import orjson

    def dumps(obj: object, *, sort_keys: bool = False, indent: bool = False) -> str:
        option = 0
        if sort_keys:
            option |= orjson.OPT_SORT_KEYS
        if indent:
            option |= orjson.OPT_INDENT_2
        return orjson.dumps(obj, option=option or None).decode("utf-8")

    loads = orjson.loads
