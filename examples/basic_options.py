"""
Basic options: lifting, composition, and instrumented lookups.

Run: python examples/basic_options.py
"""
from optionpy import ConsoleLogger, Some, from_nullable, instrument, none

USERS = {1: {"name": "ann", "manager": 2}, 2: {"name": "bob"}}


def main():
    logger = ConsoleLogger(level="DEBUG")
    find_user = instrument("user.find", lambda uid: from_nullable(USERS.get(uid)), logger=logger)

    # map/filter/unwrap
    print(Some(5).map(lambda x: x * 2).filter(lambda x: x > 5).unwrap())   # 10

    # bind chains short-circuit on the first missing step
    manager = find_user(1).bind(lambda u: from_nullable(u.get("manager"))).bind(find_user)
    print("manager =>", manager.map(lambda u: u["name"]))                    # Some(bob)
    print("manager of bob =>", find_user(2).bind(lambda u: from_nullable(u.get("manager"))))  # None

    # two-step composition
    total = Some(3).select_many(lambda a: Some(4), lambda a, b: a + b)
    print("total =>", total)                                                 # Some(7)

    # fold and the sequence view
    print(none().fold(0, lambda s, x: s + x))                                # 0
    print([x for o in (Some(1), none(), Some(3)) for x in o])                # [1, 3]


if __name__ == "__main__":
    main()
