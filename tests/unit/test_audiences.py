"""
Unit Tests for the Audiences Resource

Tests for audience group creation, multipart uploads, listing and
authority levels.
"""

import httpx
import pytest

from line_bot_client import (
    Audience,
    AudienceGroupAuthorityLevel,
    AudienceGroupCreateRoute,
    AudienceGroupStatus,
)
from line_bot_client.config import DATA_API_PREFIX, MESSAGING_API_PREFIX
from line_bot_client.models import (
    CreateAudienceGroupResponse,
    CreateClickAudienceGroupResponse,
    CreateImpAudienceGroupResponse,
)


FILE_CONTENT = b"U4af4980629\nU4af4980630\n\x89binary\r\ntail"


# =============================================================================
# Upload Audience Tests
# =============================================================================


class TestUploadAudiences:
    """Tests for upload audience groups."""

    @pytest.mark.asyncio
    async def test_create_upload_audience_group(self, client, respx_mock, parse_json):
        route = respx_mock.post(f"{MESSAGING_API_PREFIX}/audienceGroup/upload").mock(
            return_value=httpx.Response(
                200,
                json={
                    "audienceGroupId": 4389303728991,
                    "createRoute": "MESSAGING_API",
                    "type": "UPLOAD",
                    "description": "audienceGroupName",
                    "created": 1613698278,
                    "permission": "READ_WRITE",
                    "expireTimestamp": 1629250278,
                    "isIfaAudience": False,
                },
            )
        )

        result = await client.audiences.create_upload_audience_group(
            description="audienceGroupName",
            audiences=[Audience(id="id")],
            upload_description="uploadDescription",
        )

        assert parse_json(route.calls.last.request) == {
            "description": "audienceGroupName",
            "isIfaAudience": False,
            "audiences": [{"id": "id"}],
            "uploadDescription": "uploadDescription",
        }
        assert isinstance(result, CreateAudienceGroupResponse)
        assert result.audience_group_id == 4389303728991
        assert result.create_route == "MESSAGING_API"
        assert result.type == "UPLOAD"
        assert result.permission == "READ_WRITE"
        assert result.expire_timestamp == 1629250278
        assert result.is_ifa_audience is False

    @pytest.mark.asyncio
    async def test_create_upload_audience_group_with_tuple(self, client, respx_mock, parse_json):
        """Test that a tuple of audiences is sent as a JSON array."""
        route = respx_mock.post(f"{MESSAGING_API_PREFIX}/audienceGroup/upload").mock(
            return_value=httpx.Response(200, json={"audienceGroupId": 1})
        )

        await client.audiences.create_upload_audience_group(
            "vip", (Audience(id="U1"), Audience(id="U2"))
        )

        request = route.calls.last.request
        assert request.headers["content-type"] == "application/json"
        assert parse_json(request)["audiences"] == [{"id": "U1"}, {"id": "U2"}]

    @pytest.mark.asyncio
    async def test_create_upload_audience_group_by_file(self, client, respx_mock, parse_multipart):
        """Test that plain fields become string parts next to the file part."""
        route = respx_mock.post(f"{DATA_API_PREFIX}/audienceGroup/upload/byFile").mock(
            return_value=httpx.Response(200, json={"audienceGroupId": 123, "type": "UPLOAD"})
        )

        result = await client.audiences.create_upload_audience_group_by_file(
            description="audienceGroupName",
            file=FILE_CONTENT,
            upload_description="uploadDescription",
        )

        request = route.calls.last.request
        assert request.headers["content-type"].startswith("multipart/form-data; boundary=")
        assert request.headers["authorization"] == "Bearer test_channel_access_token"

        parts = parse_multipart(request)
        assert parts["description"][0] == b"audienceGroupName"
        assert parts["isIfaAudience"][0] == b"false"
        assert parts["uploadDescription"][0] == b"uploadDescription"

        content, headers = parts["file"]
        assert content == FILE_CONTENT
        assert len(content) == len(FILE_CONTENT)
        assert headers["content-type"] == "text/plain"
        assert 'filename="' in headers["content-disposition"]
        assert result.audience_group_id == 123

    @pytest.mark.asyncio
    async def test_upload_by_file_with_tuple(self, client, respx_mock, parse_multipart):
        """Test that a (filename, content, content_type) tuple is sent as given."""
        route = respx_mock.post(f"{DATA_API_PREFIX}/audienceGroup/upload/byFile").mock(
            return_value=httpx.Response(200, json={})
        )

        await client.audiences.create_upload_audience_group_by_file(
            description="ifa",
            file=("ifas.csv", b"abc", "text/csv"),
            is_ifa_audience=True,
        )

        parts = parse_multipart(route.calls.last.request)
        assert parts["isIfaAudience"][0] == b"true"
        assert "uploadDescription" not in parts
        content, headers = parts["file"]
        assert content == b"abc"
        assert headers["content-type"] == "text/csv"
        assert 'filename="ifas.csv"' in headers["content-disposition"]

    @pytest.mark.asyncio
    async def test_add_audiences(self, client, respx_mock, parse_json):
        route = respx_mock.put(f"{MESSAGING_API_PREFIX}/audienceGroup/upload").mock(
            return_value=httpx.Response(200, json={})
        )

        await client.audiences.add_audiences_to_upload_audience_group(
            4389303728991,
            [Audience(id="u1000"), {"id": "u2000"}],
            upload_description="fileName",
            description="audienceGroupName",
        )

        assert parse_json(route.calls.last.request) == {
            "audienceGroupId": 4389303728991,
            "description": "audienceGroupName",
            "uploadDescription": "fileName",
            "audiences": [{"id": "u1000"}, {"id": "u2000"}],
        }

    @pytest.mark.asyncio
    async def test_add_audiences_by_file(self, client, respx_mock, parse_multipart):
        route = respx_mock.put(f"{DATA_API_PREFIX}/audienceGroup/upload/byFile").mock(
            return_value=httpx.Response(200, json={})
        )

        await client.audiences.add_audiences_to_upload_audience_group_by_file(
            4389303728991, FILE_CONTENT, upload_description="fileName"
        )

        parts = parse_multipart(route.calls.last.request)
        assert parts["audienceGroupId"][0] == b"4389303728991"
        assert parts["uploadDescription"][0] == b"fileName"
        assert parts["file"][0] == FILE_CONTENT


# =============================================================================
# Interaction Audience Tests
# =============================================================================


class TestInteractionAudiences:
    """Tests for click and impression audiences."""

    @pytest.mark.asyncio
    async def test_create_click_audience_group(self, client, respx_mock, parse_json):
        route = respx_mock.post(f"{MESSAGING_API_PREFIX}/audienceGroup/click").mock(
            return_value=httpx.Response(
                200,
                json={
                    "audienceGroupId": 4389303728991,
                    "createRoute": "MESSAGING_API",
                    "type": "CLICK",
                    "description": "audienceGroupName",
                    "created": 1613705240,
                    "permission": "READ_WRITE",
                    "expireTimestamp": 1629257239,
                    "isIfaAudience": False,
                    "requestId": "bb9744f9-47fa-4a29-941e-1234567890ab",
                    "clickUrl": "https://example.com/",
                },
            )
        )

        result = await client.audiences.create_click_audience_group(
            "audienceGroupName", "bb9744f9-47fa-4a29-941e-1234567890ab", "https://example.com/"
        )

        assert parse_json(route.calls.last.request) == {
            "description": "audienceGroupName",
            "requestId": "bb9744f9-47fa-4a29-941e-1234567890ab",
            "clickUrl": "https://example.com/",
        }
        assert isinstance(result, CreateClickAudienceGroupResponse)
        assert result.audience_group_id == 4389303728991
        assert result.type == "CLICK"
        assert result.request_id == "bb9744f9-47fa-4a29-941e-1234567890ab"
        assert result.click_url == "https://example.com/"

    @pytest.mark.asyncio
    async def test_create_click_audience_group_without_url(self, client, respx_mock, parse_json):
        route = respx_mock.post(f"{MESSAGING_API_PREFIX}/audienceGroup/click").mock(
            return_value=httpx.Response(200, json={})
        )

        await client.audiences.create_click_audience_group("audienceGroupName", "requestId")

        assert parse_json(route.calls.last.request) == {
            "description": "audienceGroupName",
            "requestId": "requestId",
        }

    @pytest.mark.asyncio
    async def test_create_imp_audience_group(self, client, respx_mock, parse_json):
        route = respx_mock.post(f"{MESSAGING_API_PREFIX}/audienceGroup/imp").mock(
            return_value=httpx.Response(
                200,
                json={
                    "audienceGroupId": 4389303728991,
                    "type": "IMP",
                    "description": "description",
                    "created": 1613707097,
                    "requestId": "requestId",
                },
            )
        )

        result = await client.audiences.create_imp_audience_group("description", "requestId")

        assert parse_json(route.calls.last.request) == {
            "requestId": "requestId",
            "description": "description",
        }
        assert isinstance(result, CreateImpAudienceGroupResponse)
        assert result.audience_group_id == 4389303728991
        assert result.type == "IMP"
        assert result.request_id == "requestId"


# =============================================================================
# Audience Group Tests
# =============================================================================


class TestAudienceGroups:
    """Tests for reading and changing audience groups."""

    @pytest.mark.asyncio
    async def test_update_description(self, client, respx_mock, parse_json):
        route = respx_mock.put(f"{MESSAGING_API_PREFIX}/audienceGroup/123/updateDescription").mock(
            return_value=httpx.Response(200, json={})
        )

        await client.audiences.update_audience_group_description(123, "description")

        assert parse_json(route.calls.last.request) == {"description": "description"}

    @pytest.mark.asyncio
    async def test_activate(self, client, respx_mock):
        route = respx_mock.put(f"{MESSAGING_API_PREFIX}/audienceGroup/123/activate").mock(
            return_value=httpx.Response(202, json={})
        )

        await client.audiences.activate_audience_group(123)

        assert route.called

    @pytest.mark.asyncio
    async def test_delete(self, client, respx_mock):
        route = respx_mock.delete(f"{MESSAGING_API_PREFIX}/audienceGroup/123").mock(
            return_value=httpx.Response(200, json={})
        )

        assert await client.audiences.delete_audience_group(123) == {}
        assert route.called

    @pytest.mark.asyncio
    async def test_get_audience_group(self, client, respx_mock):
        respx_mock.get(f"{MESSAGING_API_PREFIX}/audienceGroup/123").mock(
            return_value=httpx.Response(
                200,
                json={
                    "audienceGroup": {
                        "audienceGroupId": 123,
                        "type": "UPLOAD",
                        "status": "READY",
                        "audienceCount": 1887,
                    },
                    "jobs": [{"audienceGroupJobId": 1}],
                },
            )
        )

        result = await client.audiences.get_audience_group(123)

        assert result.audience_group.audience_group_id == 123
        assert result.audience_group.status == AudienceGroupStatus.READY
        assert result.audience_group.audience_count == 1887
        assert result.jobs[0]["audienceGroupJobId"] == 1

    @pytest.mark.asyncio
    async def test_get_audience_groups(self, client, respx_mock):
        """Test that filters are sent as query parameters, booleans as true/false."""
        route = respx_mock.get(f"{MESSAGING_API_PREFIX}/audienceGroup/list").mock(
            return_value=httpx.Response(
                200,
                json={
                    "audienceGroups": [{"audienceGroupId": 1}, {"audienceGroupId": 2}],
                    "hasNextPage": False,
                    "totalCount": 2,
                },
            )
        )

        result = await client.audiences.get_audience_groups(
            page=1,
            description="description",
            status=AudienceGroupStatus.READY,
            size=1,
            create_route=AudienceGroupCreateRoute.MESSAGING_API,
            includes_external_public_groups=True,
        )

        params = route.calls.last.request.url.params
        assert dict(params) == {
            "page": "1",
            "description": "description",
            "status": "READY",
            "size": "1",
            "createRoute": "MESSAGING_API",
            "includesExternalPublicGroups": "true",
        }
        assert [g.audience_group_id for g in result.audience_groups] == [1, 2]
        assert result.has_next_page is False

    @pytest.mark.asyncio
    async def test_get_audience_groups_omits_unset_filters(self, client, respx_mock):
        route = respx_mock.get(f"{MESSAGING_API_PREFIX}/audienceGroup/list").mock(
            return_value=httpx.Response(200, json={})
        )

        await client.audiences.get_audience_groups()

        assert dict(route.calls.last.request.url.params) == {"page": "1"}


# =============================================================================
# Authority Level Tests
# =============================================================================


class TestAuthorityLevel:
    """Tests for the audience authority level."""

    @pytest.mark.asyncio
    async def test_get_authority_level(self, client, respx_mock):
        respx_mock.get(f"{MESSAGING_API_PREFIX}/audienceGroup/authorityLevel").mock(
            return_value=httpx.Response(200, json={"authorityLevel": "PUBLIC"})
        )

        result = await client.audiences.get_authority_level()

        assert result.authority_level == "PUBLIC"

    @pytest.mark.asyncio
    async def test_update_authority_level(self, client, respx_mock, parse_json):
        route = respx_mock.put(f"{MESSAGING_API_PREFIX}/audienceGroup/authorityLevel").mock(
            return_value=httpx.Response(200, json={})
        )

        await client.audiences.update_authority_level(AudienceGroupAuthorityLevel.PRIVATE)

        assert parse_json(route.calls.last.request) == {"authorityLevel": "PRIVATE"}
