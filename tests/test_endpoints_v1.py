"""Tests for the 1.0 endpoints."""

import json

import httpx
import pytest
import respx

from bitbucket_client.models.v1 import Component, Issue, IssueComment, Milestone, Version

from conftest import API_V1

REPO = f"{API_V1}repositories/acme/widget/"
ISSUES = f"{REPO}issues/"


@pytest.fixture
def repository(client_v1):
    return client_v1.repositories_end_point("acme", "widget")


@pytest.fixture
def issues(repository):
    return repository.issues_resource()


class TestRepositoriesEndPoint:
    """Tests for the 1.0 repository resource."""

    def test_repository_path(self, repository):
        """Test path formatting."""
        assert repository.repository_path("branches") == "repositories/acme/widget/branches"

    @pytest.mark.asyncio
    @respx.mock
    async def test_list_branches(self, repository):
        """Test that branches are keyed by name."""
        respx.get(f"{REPO}branches").mock(
            return_value=httpx.Response(
                200,
                json={
                    "main": {"node": "abc", "branch": "main", "files": [{"file": "x.py", "type": "modified"}]},
                    "dev": {"node": "def", "branch": "dev"},
                },
            )
        )

        branches = (await repository.list_branches()).unwrap()

        assert set(branches) == {"main", "dev"}
        assert branches["main"].files[0].type == "modified"


class TestIssues:
    """Tests for the issue tracker."""

    @pytest.mark.asyncio
    @respx.mock
    async def test_list_issues(self, issues):
        """Test the unfiltered issue listing."""
        route = respx.get(ISSUES).mock(
            return_value=httpx.Response(
                200, json={"count": 2, "issues": [{"local_id": 1, "title": "Crash"}, {"local_id": 2}]}
            )
        )

        info = (await issues.list_issues()).unwrap()

        assert info.count == 2
        assert info.issues[0].title == "Crash"
        assert "status" not in route.calls.last.request.url.params

    @pytest.mark.asyncio
    @respx.mock
    async def test_list_issues_filtered(self, issues):
        """Test that filters are sent as query parameters."""
        route = respx.get(ISSUES).mock(return_value=httpx.Response(200, json={"count": 1, "issues": []}))

        await issues.list_issues(status="open", search="crash")

        params = route.calls.last.request.url.params
        assert params["status"] == "open"
        assert params["search"] == "crash"
        assert params["access_token"] == "test_token"

    @pytest.mark.asyncio
    @respx.mock
    async def test_issue_crud(self, issues):
        """Test creating, reading, updating and deleting an issue."""
        post = respx.post(ISSUES).mock(
            return_value=httpx.Response(200, json={"local_id": 9, "title": "New", "status": "new"})
        )
        get = respx.get(f"{ISSUES}9").mock(return_value=httpx.Response(200, json={"local_id": 9}))
        put = respx.put(f"{ISSUES}9").mock(
            return_value=httpx.Response(200, json={"local_id": 9, "status": "resolved"})
        )
        delete = respx.delete(f"{ISSUES}9").mock(return_value=httpx.Response(204))

        created = (await issues.post_issue(Issue(title="New", content="Broken"))).unwrap()
        fetched = (await issues.get_issue(9)).unwrap()
        updated = (await issues.put_issue(Issue(local_id=9, status="resolved"))).unwrap()
        deleted = await issues.delete_issue(9)

        assert created.local_id == 9
        assert fetched.local_id == 9
        assert updated.status == "resolved"
        assert deleted.value is None
        assert json.loads(post.calls.last.request.content) == {"title": "New", "content": "Broken"}
        assert get.called and put.called and delete.called

    @pytest.mark.asyncio
    @respx.mock
    async def test_followers_and_comments(self, issues):
        """Test issue followers and the comment operations."""
        respx.get(f"{ISSUES}9/followers").mock(
            return_value=httpx.Response(200, json={"count": 1, "followers": [{"username": "bob"}]})
        )
        respx.get(f"{ISSUES}9/comments").mock(
            return_value=httpx.Response(200, json=[{"comment_id": 1, "content": "Same here"}])
        )
        respx.get(f"{ISSUES}9/comments/1").mock(
            return_value=httpx.Response(200, json={"comment_id": 1, "content": "Same here"})
        )
        post = respx.post(f"{ISSUES}9/comments").mock(
            return_value=httpx.Response(200, json={"comment_id": 2, "content": "Fixed"})
        )
        put = respx.put(f"{ISSUES}9/comments/2").mock(
            return_value=httpx.Response(200, json={"comment_id": 2, "content": "Really fixed"})
        )
        delete = respx.delete(f"{ISSUES}9/comments/2").mock(return_value=httpx.Response(204))

        followers = (await issues.list_issue_followers(9)).unwrap()
        comments = (await issues.list_issue_comments(9)).unwrap()
        comment = (await issues.get_issue_comment(9, 1)).unwrap()
        created = (await issues.post_issue_comment(9, IssueComment(content="Fixed"))).unwrap()
        updated = (await issues.put_issue_comment(9, IssueComment(comment_id=2, content="Really fixed"))).unwrap()
        await issues.delete_issue_comment(9, 2)

        assert followers.followers[0].username == "bob"
        assert [c.comment_id for c in comments] == [1]
        assert comment.content == "Same here"
        assert created.comment_id == 2
        assert updated.content == "Really fixed"
        assert post.called and put.called and delete.called

    @pytest.mark.asyncio
    @respx.mock
    async def test_issue_resource_delegates(self, issues):
        """Test that the single-issue handle targets its own issue."""
        issue = issues.issue_resource(4)
        get = respx.get(f"{ISSUES}4").mock(return_value=httpx.Response(200, json={"local_id": 4}))
        comments = respx.get(f"{ISSUES}4/comments").mock(return_value=httpx.Response(200, json=[]))
        delete = respx.delete(f"{ISSUES}4/comments/3").mock(return_value=httpx.Response(204))

        assert (await issue.get_issue()).unwrap().local_id == 4
        assert (await issue.list_comments()).unwrap() == []
        await issue.delete_comment(3)

        assert get.called and comments.called and delete.called


class TestIssueMetadataCollections:
    """Tests for components, versions and milestones."""

    @pytest.mark.asyncio
    @respx.mock
    async def test_components(self, issues):
        """Test component create, read, update, delete and list."""
        respx.get(f"{ISSUES}components").mock(
            return_value=httpx.Response(200, json=[{"id": 1, "name": "api"}])
        )
        respx.get(f"{ISSUES}components/1").mock(return_value=httpx.Response(200, json={"id": 1, "name": "api"}))
        post = respx.post(f"{ISSUES}components").mock(
            return_value=httpx.Response(200, json={"id": 2, "name": "ui"})
        )
        put = respx.put(f"{ISSUES}components/2").mock(
            return_value=httpx.Response(200, json={"id": 2, "name": "web"})
        )
        delete = respx.delete(f"{ISSUES}components/2").mock(return_value=httpx.Response(204))

        listed = (await issues.list_components()).unwrap()
        fetched = (await issues.get_component(1)).unwrap()
        created = (await issues.post_component(Component(name="ui"))).unwrap()
        updated = (await issues.put_component(Component(id=2, name="web"))).unwrap()
        await issues.delete_component(2)

        assert isinstance(listed[0], Component)
        assert fetched.name == "api"
        assert isinstance(created, Component) and created.id == 2
        assert updated.name == "web"
        assert json.loads(post.calls.last.request.content) == {"name": "ui"}
        assert put.called and delete.called

    @pytest.mark.asyncio
    @respx.mock
    async def test_versions(self, issues):
        """Test the versions collection."""
        respx.get(f"{ISSUES}versions").mock(return_value=httpx.Response(200, json=[{"id": 1, "name": "1.0"}]))
        put = respx.put(f"{ISSUES}versions/1").mock(return_value=httpx.Response(200, json={"id": 1, "name": "1.1"}))

        listed = (await issues.list_versions()).unwrap()
        updated = (await issues.put_version(Version(id=1, name="1.1"))).unwrap()

        assert listed[0].name == "1.0"
        assert isinstance(updated, Version)
        assert put.called

    @pytest.mark.asyncio
    @respx.mock
    async def test_milestones(self, issues):
        """Test the milestones collection."""
        get = respx.get(f"{ISSUES}milestones/5").mock(
            return_value=httpx.Response(200, json={"id": 5, "name": "Q3"})
        )
        delete = respx.delete(f"{ISSUES}milestones/5").mock(return_value=httpx.Response(204))
        post = respx.post(f"{ISSUES}milestones").mock(return_value=httpx.Response(200, json={"id": 6, "name": "Q4"}))

        assert (await issues.get_milestone(5)).unwrap().name == "Q3"
        assert (await issues.post_milestone(Milestone(name="Q4"))).unwrap().id == 6
        await issues.delete_milestone(5)

        assert get.called and post.called and delete.called


class TestUserEndPoint:
    """Tests for the authenticated user's resources."""

    @pytest.mark.asyncio
    @respx.mock
    async def test_info_and_repositories(self, client_v1):
        """Test the user info and repository listings."""
        user = client_v1.user_end_point()
        respx.get(f"{API_V1}user/").mock(
            return_value=httpx.Response(
                200,
                json={"user": {"username": "alice"}, "repositories": [{"slug": "widget", "owner": "acme"}]},
            )
        )
        respx.get(f"{API_V1}user/privileges").mock(
            return_value=httpx.Response(200, json={"teams": {"acme": "admin"}})
        )
        respx.get(f"{API_V1}user/follows").mock(return_value=httpx.Response(200, json=[{"slug": "other"}]))
        respx.get(f"{API_V1}user/repositories").mock(return_value=httpx.Response(200, json=[{"slug": "widget"}]))
        respx.get(f"{API_V1}user/repositories/overview").mock(
            return_value=httpx.Response(200, json={"updated": [{"slug": "widget"}], "viewed": []})
        )
        respx.get(f"{API_V1}user/repositories/dashboard").mock(
            return_value=httpx.Response(200, json=[[{"username": "acme"}, []]])
        )

        info = (await user.get_info()).unwrap()
        assert info.user.username == "alice"
        assert info.repositories[0].owner == "acme"
        assert (await user.list_privileges()).unwrap().teams == {"acme": "admin"}
        assert (await user.list_follows()).unwrap()[0].slug == "other"
        assert (await user.list_repositories()).unwrap()[0].slug == "widget"
        assert (await user.repositories_overview()).unwrap().updated[0].slug == "widget"
        assert (await user.get_repository_dashboard()).unwrap().json()[0][0]["username"] == "acme"


class TestUsersEndPoint:
    """Tests for account resources of any user."""

    @pytest.mark.asyncio
    @respx.mock
    async def test_account_resources(self, client_v1):
        """Test events, invitations, followers, consumers, keys and emails."""
        users = client_v1.users_end_point("alice")
        base = f"{API_V1}users/alice/"
        respx.get(f"{base}events/").mock(
            return_value=httpx.Response(200, json={"count": 1, "events": [{"event": "commit"}]})
        )
        respx.get(f"{base}privileges/").mock(return_value=httpx.Response(200, json={"teams": {}}))
        respx.get(f"{base}invitations/").mock(
            return_value=httpx.Response(200, json={"count": 1, "invitations": [{"email": "bob@example.com"}]})
        )
        respx.get(f"{base}invitations/bob@example.com").mock(return_value=httpx.Response(200, text="[]"))
        respx.get(f"{base}followers/").mock(
            return_value=httpx.Response(200, json={"count": 0, "followers": []})
        )
        respx.get(f"{base}consumers/").mock(return_value=httpx.Response(200, json=[{"id": 1, "name": "ci"}]))
        respx.get(f"{base}consumers/1").mock(return_value=httpx.Response(200, json={"id": 1, "key": "k"}))
        respx.get(f"{base}ssh-keys/").mock(return_value=httpx.Response(200, json=[{"pk": 3, "label": "laptop"}]))
        respx.get(f"{base}ssh-keys/3").mock(
            return_value=httpx.Response(200, json={"pk": 3, "user": {"username": "alice"}})
        )
        respx.get(f"{base}emails/").mock(
            return_value=httpx.Response(200, json=[{"email": "alice@example.com", "primary": True}])
        )
        respx.get(f"{base}emails/alice@example.com").mock(
            return_value=httpx.Response(200, json={"email": "alice@example.com", "active": True})
        )

        assert (await users.list_user_events()).unwrap().events[0].event == "commit"
        assert (await users.list_user_privileges()).unwrap().teams == {}
        assert (await users.list_invitations()).unwrap().count == 1
        assert (await users.get_invitations_for("bob@example.com")).unwrap().text == "[]"
        assert (await users.list_followers()).unwrap().count == 0
        assert (await users.list_consumers()).unwrap()[0].name == "ci"
        assert (await users.get_consumer(1)).unwrap().key == "k"
        assert (await users.list_ssh_keys()).unwrap()[0].label == "laptop"
        assert (await users.get_ssh_key(3)).unwrap().user.username == "alice"
        assert (await users.list_emails()).unwrap()[0].primary is True
        assert (await users.get_email("alice@example.com")).unwrap().active is True
