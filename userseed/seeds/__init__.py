# userseed/seeds/__init__.py
#
# Every module in this package exposing run(db) is a seed. Seeds run in
# module-name order.
