from storefront_media.media.aggregator import (
    DEFAULT_GALLERY_RULES,
    ExtractionRule,
    collect_gallery_media,
    collect_gallery_urls,
    get_media_array,
    iter_rule_references,
)


def _rule(name):
    return next(rule for rule in DEFAULT_GALLERY_RULES if rule.name == name)


def test_description_files_gallery_keeps_only_images(config):
    entity = {"description_files": ["http://cdn/x.pdf", "http://cdn/y.png"]}
    assert collect_gallery_urls(entity, config=config) == ["http://cdn/y.png"]


def test_duplicate_across_primary_and_media_appears_once_at_first_position(config):
    entity = {
        "primary_image": "https://cdn.example.com/a.png",
        "media": [
            {"url": "https://cdn.example.com/b.png"},
            {"url": "https://cdn.example.com/a.png"},
        ],
    }
    assert collect_gallery_urls(entity, config=config) == [
        "https://cdn.example.com/a.png",
        "https://cdn.example.com/b.png",
    ]


def test_duplicate_after_relative_resolution_is_removed(config):
    entity = {
        "primary_image": "/media/a.png",
        "media": [{"file": config.origin + "/media/a.png"}],
    }
    assert collect_gallery_urls(entity, config=config) == [config.origin + "/media/a.png"]


def test_all_non_image_entries_fall_back_to_raw_list(config):
    entity = {
        "others_files": [
            "https://cdn.example.com/contract.docx",
            "https://cdn.example.com/terms.pdf",
            "https://cdn.example.com/contract.docx",
        ]
    }
    assert collect_gallery_urls(entity, config=config) == [
        "https://cdn.example.com/contract.docx",
        "https://cdn.example.com/terms.pdf",
    ]


def test_ambiguous_urls_are_dropped_when_images_exist(config):
    entity = {
        "media": [
            {"url": "https://cdn.example.com/download?id=1"},
            {"url": "https://cdn.example.com/b.jpg"},
        ]
    }
    assert collect_gallery_urls(entity, config=config) == ["https://cdn.example.com/b.jpg"]


def test_cdn_descriptors_count_as_images(config):
    entity = {"media": [{"public_id": "products/9"}]}
    assert collect_gallery_urls(entity, config=config) == [
        "https://res.cloudinary.com/demo/image/upload/q_auto,f_auto/products/9"
    ]


def test_field_priority_order(config):
    entity = {
        "questions_answers_files": ["https://cdn.example.com/qa.png"],
        "description_files": ["https://cdn.example.com/desc.png"],
        "images": ["https://cdn.example.com/img.png"],
        "primary_image_url": "https://cdn.example.com/primary.png",
    }
    assert collect_gallery_urls(entity, config=config) == [
        "https://cdn.example.com/primary.png",
        "https://cdn.example.com/img.png",
        "https://cdn.example.com/desc.png",
        "https://cdn.example.com/qa.png",
    ]


def test_unresolvable_entries_are_skipped(config):
    entity = {
        "media": [None, "", {"caption": "no url"}, 5, {"url": "https://cdn.example.com/ok.png"}],
        "benefits_files": "not-a-list",
    }
    assert collect_gallery_urls(entity, config=config) == ["https://cdn.example.com/ok.png"]


def test_empty_and_invalid_entities(config):
    assert collect_gallery_urls({}, config=config) == []
    assert collect_gallery_urls(None, config=config) == []
    assert collect_gallery_urls("https://cdn.example.com/a.png", config=config) == []


def test_bare_list_is_treated_as_media_array(config):
    assert collect_gallery_urls(["/a.png", {"url": "/b.txt"}], config=config) == [config.origin + "/a.png"]


def test_get_media_array_candidates():
    assert get_media_array({"media": [], "images": ["a"]}) == ["a"]
    assert get_media_array({"media": {"results": ["r"]}}) == ["r"]
    assert get_media_array({"media_set": ["s"], "media_items": ["i"]}) == ["i"]
    assert get_media_array(["x"]) == ["x"]
    assert get_media_array({"media": "nope"}) == []
    assert get_media_array(None) == []


def test_primary_rule_yields_flat_fields_in_order():
    entity = {"primary_image_url": "b", "primary_image": {"url": "a"}}
    assert list(iter_rule_references(entity, _rule("primary"))) == [{"url": "a"}, "b"]


def test_media_rule_uses_first_non_empty_array_only():
    entity = {"media": [], "images": ["i1", "i2"], "media_items": ["m1"]}
    assert list(iter_rule_references(entity, _rule("media"))) == ["i1", "i2"]


def test_section_rule_reads_its_own_key():
    entity = {"specification_files": ["s1", None, "s2"], "description_files": ["d1"]}
    assert list(iter_rule_references(entity, _rule("specification_files"))) == ["s1", "s2"]


def test_custom_rules_replace_defaults(config):
    rules = (ExtractionRule("logo", ("company.logo",)),)
    entity = {"company": {"logo": "/logo.svg"}, "primary_image": "/p.png"}
    assert collect_gallery_urls(entity, config=config, rules=rules) == [config.origin + "/logo.svg"]


def test_gallery_media_carries_kinds(config):
    entity = {
        "media": [
            {"url": "https://cdn.example.com/a.png", "media_type": "image"},
            {"url": "https://cdn.example.com/b.mp4", "media_type": "video"},
        ]
    }
    media = collect_gallery_media(entity, config=config)
    assert [(m.url, m.kind) for m in media] == [("https://cdn.example.com/a.png", "image")]

    only_video = {"media": [{"url": "https://cdn.example.com/b.mp4", "media_type": "video"}]}
    media = collect_gallery_media(only_video, config=config)
    assert [(m.url, m.kind) for m in media] == [("https://cdn.example.com/b.mp4", "video")]


def test_explicit_empty_rule_table_collects_nothing(config):
    entity = {"primary_image": "/p.png", "media": ["/m.png"]}
    assert collect_gallery_urls(entity, config=config, rules=()) == []
    assert collect_gallery_media(entity, config=config, rules=()) == []
