from optionpy import some, none, from_nullable

USERS = {1: "ada", 2: "grace"}


def find_user(uid: int):
    return from_nullable(USERS.get(uid))


def main():
    print(find_user(1).map(str.title))                       # Some(Ada)
    print(find_user(3).map(str.title))                       # None
    print(find_user(3).value_or("anonymous"))                # anonymous
    print(some(8).filter(lambda x: x % 2 == 0).flat_map(lambda x: some(x // 2)))  # Some(4)
    none().match(lambda v: print("got", v), lambda: print("nothing here"))


if __name__ == "__main__":
    main()
