"""Post API tests."""

from tests.queries import CREATE_COMMENT, CREATE_POST, DELETE_POST, GET_POST, GET_POSTS, UPDATE_POST


def create_post(graphql, author_id, title="Hello", content="First post"):
    result = graphql(CREATE_POST, title=title, content=content, authorId=author_id)
    assert "errors" not in result
    return result["data"]["createPost"]["post"]


def test_create_post(graphql, signed_in):
    """Test creating a post."""
    result = graphql(CREATE_POST, title="Hello", content="First post", authorId=signed_in["id"])
    payload = result["data"]["createPost"]
    assert payload["success"] is True
    assert payload["post"]["title"] == "Hello"
    assert payload["post"]["authorId"] == signed_in["id"]


def test_get_post(graphql, signed_in):
    """Test that a created post reads back with its author."""
    post = create_post(graphql, signed_in["id"], title="Round trip", content="Body")

    result = graphql(GET_POST, id=post["id"])
    fetched = result["data"]["getPost"]
    assert fetched["title"] == "Round trip"
    assert fetched["content"] == "Body"
    assert fetched["author"] == {"id": signed_in["id"], "name": "Test User"}
    assert fetched["comments"] == []


def test_get_post_with_comments(graphql, signed_in):
    """Test that getPost nests comments and their authors."""
    post = create_post(graphql, signed_in["id"])
    graphql(
        CREATE_COMMENT,
        title="Nice",
        content="Great post",
        authorId=signed_in["id"],
        postId=post["id"],
    )

    fetched = graphql(GET_POST, id=post["id"])["data"]["getPost"]
    assert len(fetched["comments"]) == 1
    assert fetched["comments"][0]["title"] == "Nice"
    assert fetched["comments"][0]["author"]["name"] == "Test User"


def test_get_post_not_found(graphql):
    """Test reading a missing post."""
    result = graphql(GET_POST, id=9999)
    assert result["data"] is None
    assert result["errors"][0]["extensions"]["code"] == "NOT_FOUND"
    assert result["errors"][0]["message"] == "Post 9999 not found"


def test_get_posts(graphql, signed_in):
    """Test listing posts, newest first."""
    create_post(graphql, signed_in["id"], title="Older")
    create_post(graphql, signed_in["id"], title="Newer")

    result = graphql(GET_POSTS)
    titles = [post["title"] for post in result["data"]["getPosts"]["posts"]]
    assert titles == ["Newer", "Older"]


def test_get_posts_empty(graphql):
    """Test listing posts when there are none."""
    result = graphql(GET_POSTS)
    assert result["data"]["getPosts"]["posts"] == []


def test_create_post_unknown_author(graphql):
    """Test that a post must reference an existing user."""
    result = graphql(CREATE_POST, title="Orphan", content="No author", authorId=4242)
    assert result["errors"][0]["extensions"]["code"] == "NOT_FOUND"
    assert "User 4242" in result["errors"][0]["message"]


def test_create_post_blank_title(graphql, signed_in):
    """Test that a blank title fails validation."""
    result = graphql(CREATE_POST, title="", content="Body", authorId=signed_in["id"])
    assert result["errors"][0]["extensions"]["code"] == "VALIDATION_ERROR"
    assert "title" in result["errors"][0]["message"]


def test_update_post(graphql, signed_in):
    """Test updating a post."""
    post = create_post(graphql, signed_in["id"])

    result = graphql(UPDATE_POST, id=post["id"], title="Edited", content="New body")
    assert result["data"]["updatePost"]["success"] is True

    fetched = graphql(GET_POST, id=post["id"])["data"]["getPost"]
    assert fetched["title"] == "Edited"
    assert fetched["content"] == "New body"


def test_update_post_partial(graphql, signed_in):
    """Test that omitted fields are left unchanged."""
    post = create_post(graphql, signed_in["id"], title="Keep", content="Old body")

    graphql(UPDATE_POST, id=post["id"], content="New body")

    fetched = graphql(GET_POST, id=post["id"])["data"]["getPost"]
    assert fetched["title"] == "Keep"
    assert fetched["content"] == "New body"


def test_update_post_not_found(graphql):
    """Test updating a missing post."""
    result = graphql(UPDATE_POST, id=9999, title="Nope")
    assert result["errors"][0]["extensions"]["code"] == "NOT_FOUND"


def test_delete_post(graphql, signed_in):
    """Test deleting a post."""
    post = create_post(graphql, signed_in["id"])

    result = graphql(DELETE_POST, id=post["id"])
    assert result["data"]["deletePost"]["success"] is True

    result = graphql(GET_POST, id=post["id"])
    assert result["errors"][0]["extensions"]["code"] == "NOT_FOUND"


def test_delete_post_removes_comments(graphql, signed_in, db):
    """Test that comments go with their post."""
    from blog_api.models.comment import Comment

    post = create_post(graphql, signed_in["id"])
    graphql(
        CREATE_COMMENT, title="Bye", content="Soon gone", authorId=signed_in["id"], postId=post["id"]
    )

    graphql(DELETE_POST, id=post["id"])
    assert db.query(Comment).count() == 0


def test_delete_post_not_found(graphql):
    """Test deleting a missing post."""
    result = graphql(DELETE_POST, id=9999)
    assert result["errors"][0]["extensions"]["code"] == "NOT_FOUND"


def test_any_caller_can_edit_any_post(graphql, signed_in):
    """Test that posts carry no ownership check."""
    other = graphql(
        """
        mutation { signupUser(data: { email: "other@example.com", password: "x" }) { id } }
        """
    )["data"]["signupUser"]
    post = create_post(graphql, other["id"], title="Theirs")

    result = graphql(UPDATE_POST, id=post["id"], title="Mine now", token=signed_in.token)
    assert result["data"]["updatePost"]["post"]["title"] == "Mine now"


def test_write_gate_rejects_missing_token(graphql, signed_in, write_gate):
    """Test that gated writes need a token."""
    result = graphql(CREATE_POST, title="Hello", content="Body", authorId=signed_in["id"])
    assert result["errors"][0]["extensions"]["code"] == "UNAUTHENTICATED"


def test_write_gate_rejects_bad_token(graphql, signed_in, write_gate):
    """Test that gated writes need a valid token."""
    result = graphql(
        CREATE_POST, title="Hello", content="Body", authorId=signed_in["id"], token="garbage"
    )
    assert result["errors"][0]["extensions"]["code"] == "UNAUTHENTICATED"


def test_write_gate_accepts_valid_token(graphql, signed_in, write_gate):
    """Test that gated writes succeed with a valid token."""
    result = graphql(
        CREATE_POST,
        title="Hello",
        content="Body",
        authorId=signed_in["id"],
        token=signed_in.token,
    )
    assert result["data"]["createPost"]["success"] is True
