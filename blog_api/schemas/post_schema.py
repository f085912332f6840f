from blog_api.extensions.extensions import ma



class AuthorSchema(ma.Schema):
    id = ma.Int()
    username = ma.Str()


class PostResponseSchema(ma.Schema):
    id = ma.Int()
    title = ma.Str()
    summary = ma.Str()
    content = ma.Str()
    cover_url = ma.Str(allow_none=True)
    author = ma.Nested(AuthorSchema, allow_none=True)
    created_at = ma.DateTime()
    updated_at = ma.DateTime()
