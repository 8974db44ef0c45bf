from __future__ import annotations

from tsgen.generation.profile import GenerationProfile


class TestGenerationProfile:
    def test_defaults_to_enum_blocks(self) -> None:
        profile = GenerationProfile()
        assert profile.enum_as_union is False
        assert profile.namespace == "T"
        assert profile.skip_names == frozenset({"ResponseBase", "DictionaryResponseBase"})
        assert "GetResponse" in profile.stable_names

    def test_from_env_without_toggle(self) -> None:
        assert GenerationProfile.from_env({}).enum_as_union is False
        assert GenerationProfile.from_env({"ENUM_AS_UNION": ""}).enum_as_union is False

    def test_from_env_with_toggle(self) -> None:
        profile = GenerationProfile.from_env({"ENUM_AS_UNION": "true"}, namespace="Api")
        assert profile.enum_as_union is True
        assert profile.namespace == "Api"

    def test_skip_names_follow_base_names(self) -> None:
        profile = GenerationProfile(response_base="BaseResponse", dictionary_response_base="MapResponse")
        assert profile.skip_names == frozenset({"BaseResponse", "MapResponse"})
