"""
Tests for the declared GraphQL schema shape
"""

from postboard.graphql import schema, validate_schema


def test_schema_validates():
    validate_schema()


def test_schema_declares_expected_shape():
    sdl = schema.as_str()

    assert "interface TextWithCreatedAt" in sdl
    assert "type Post implements TextWithCreatedAt" in sdl
    assert "type Comment implements TextWithCreatedAt" in sdl
    assert "scalar DateTime" in sdl
    assert "enum AvatarSizes" in sdl
    assert 'S_32 @deprecated(reason: "Too small. Use S_64 instead")' in sdl
    assert "avatar(size: AvatarSizes = S_128): String" in sdl
    assert "addComment(comment: CommentInput!): Comment" in sdl
    assert "addPost(post: PostInput!): Post" in sdl
    assert "comments(postId: ID!): [Comment!]!" in sdl


def type_block(sdl: str, header: str) -> str:
    return sdl.split(header, 1)[1].split("}", 1)[0]


def test_private_fields_are_not_exposed():
    sdl = schema.as_str()

    post = type_block(sdl, "type Post implements TextWithCreatedAt")
    comment = type_block(sdl, "type Comment implements TextWithCreatedAt")

    assert "storedImage" not in post
    assert "authorId" not in post
    assert "authorId" not in comment
    assert "postId" not in comment
    assert "image: String" in post
