"""Document store collection names"""


class Collections:
    BLOGS = "blogs"
    USERS = "users"
