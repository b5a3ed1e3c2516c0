from asana_api.endpoints import users, with_query


def test_user_paths():
    assert users.me() == "/users/me"
    assert users.users() == "/users"
    assert users.user("811156077822027") == "/users/811156077822027"
    assert users.team("42") == "/teams/42/users"
    assert users.workspace("67890") == "/workspaces/67890/users"


def test_user_gid_is_percent_encoded():
    assert users.user("something not valid") == "/users/something%20not%20valid"
    assert users.user("a/b") == "/users/a%2Fb"


def test_favorites_query():
    assert (
        users.favorites("me", "project", "67890")
        == "/users/me/favorites?resource_type=project&workspace=67890"
    )


def test_optional_query_params():
    assert users.users(workspace="67890") == "/users?workspace=67890"
    assert users.me(opt_fields="name,email") == "/users/me?opt_fields=name%2Cemail"
    assert users.user("1", opt_fields=None) == "/users/1"


def test_with_query_appends_and_skips_none():
    assert with_query("/tasks") == "/tasks"
    assert with_query("/tasks", project="1", assignee=None) == "/tasks?project=1"
    assert with_query("/tasks?project=1", completed=False) == "/tasks?project=1&completed=false"
