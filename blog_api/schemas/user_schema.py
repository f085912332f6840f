from blog_api.extensions.extensions import ma


class UserResponseSchema(ma.Schema):
    id = ma.Int()
    username = ma.Str()
