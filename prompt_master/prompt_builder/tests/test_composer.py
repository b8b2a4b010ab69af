import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[3]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from prompt_master.prompt_builder import composer
from prompt_master.prompt_builder.models import GlobalConfig, SubjectConfig


def _woman(**fields):
    return SubjectConfig(gender="female", nationality=["Taiwanese"], age=["20 years old"], **fields)


def test_human_headline():
    assert composer.build_headline(_woman(), "en") == "A Taiwanese 20 years old woman"
    assert composer.build_headline(_woman(), "zh") == "一個台灣20歲女性"
    assert composer.build_headline(SubjectConfig(role=["doctor"]), "en") == "A person doctor"


def test_non_human_headlines():
    animal = SubjectConfig(subject_type="animal", animal_species="cat", animal_fur=["white fur"])
    assert composer.build_headline(animal, "en") == "A white fur cat"
    assert composer.build_headline(SubjectConfig(subject_type="animal"), "en") == "A animal"

    vehicle = SubjectConfig(subject_type="vehicle", vehicle_type="sports car", vehicle_color="metallic red paint")
    assert composer.build_headline(vehicle, "en") == "A metallic red paint sports car"
    assert composer.build_headline(vehicle, "zh") == "一個金屬紅跑車"
    assert composer.build_headline(SubjectConfig(subject_type="vehicle"), "en") == "A vehicle"

    assert composer.build_headline(SubjectConfig(subject_type="scenery"), "en") == "A scenic landscape"
    assert composer.build_headline(SubjectConfig(subject_type="scenery"), "zh") == "一個風景畫面"


def test_infographic_headline_includes_topic():
    chart = SubjectConfig(
        subject_type="infographic",
        chart_type="bar chart",
        infographic_style="flat design",
        infographic_content="renewable energy",
    )
    assert composer.build_headline(chart, "en") == "A flat design bar chart about renewable energy"
    assert composer.build_headline(chart, "zh") == "一個關於renewable energy的扁平設計長條圖"


def test_fields_outside_allowed_set_are_ignored():
    vehicle = SubjectConfig(subject_type="vehicle", vehicle_type="truck", clothing=["leather jacket"], mood=["angry"])
    fields = composer.compose_subject(vehicle, "en")
    assert set(fields) == {"headline"}
    slots = composer.compose_slots([vehicle], GlobalConfig(), "en")
    assert slots == ["A truck"]


def test_compose_subject_keys_are_stable():
    fields = composer.compose_subject(SubjectConfig(), "en")
    assert fields["headline"] == "A person"
    assert fields["clothing"] == ""
    assert "nationality" not in fields
    assert "animal_species" not in fields


def test_gender_constrained_values_are_dropped():
    subject = _woman(clothing=["tuxedo", "leather jacket"])
    assert composer.subject_values(subject, "clothing") == ["leather jacket"]
    assert composer.subject_values(SubjectConfig(clothing=["tuxedo"]), "clothing") == ["tuxedo"]


def test_single_subject_generation_order():
    subject = _woman(clothing=["white button-up shirt"], action=["sitting"])
    config = GlobalConfig(
        environment=["beach"],
        lighting=["golden hour"],
        aspect_ratio=["aspect ratio 16:9"],
        quality=["masterpiece"],
        camera_movement=["camera dolly in"],
    )
    assert composer.compose_slots([subject], config, "en") == [
        "A Taiwanese 20 years old woman",
        "sitting",
        "beach",
        "white button-up shirt",
        "golden hour",
        "masterpiece",
        "aspect ratio 16:9",
    ]


def test_video_order_opens_with_camera_movement():
    subject = _woman(action=["sitting"])
    config = GlobalConfig(
        task_mode="video_generation",
        environment=["beach"],
        camera_movement=["camera dolly in"],
        motion_strength=["slow motion"],
        aspect_ratio=["aspect ratio 16:9"],
    )
    assert composer.compose_slots([subject], config, "en") == [
        "camera dolly in",
        "A Taiwanese 20 years old woman",
        "beach",
        "sitting",
        "slow motion",
    ]


def test_mode_exclusivity():
    assert composer.category_excluded("aspect_ratio", "video_generation")
    assert not composer.category_excluded("camera_movement", "video_generation")
    assert composer.category_excluded("camera_movement", "generation")
    assert composer.category_excluded("motion_strength", "editing")
    assert not composer.category_excluded("aspect_ratio", "editing")


def test_scenery_filters_framing_and_moods():
    scenery = SubjectConfig(subject_type="scenery", mood=["happy, smiling", "peaceful, serene"])
    config = GlobalConfig(composition=["close-up portrait", "rule of thirds"], camera=["85mm lens", "wide angle lens"])
    slots = composer.compose_slots([scenery], config, "en")
    assert slots == ["A scenic landscape", "rule of thirds", "wide angle lens", "peaceful, serene"]


def test_framing_kept_when_a_human_shares_the_scene():
    scenery = SubjectConfig(subject_type="scenery")
    config = GlobalConfig(composition=["close-up portrait"])
    slots = composer.compose_slots([scenery, SubjectConfig(gender="male")], config, "en")
    assert slots[-1] == "close-up portrait"


def test_multi_subject_slots():
    config = GlobalConfig(interaction="walking together", environment=["forest"])
    subjects = [
        SubjectConfig(id="s1", gender="female", nationality=["Taiwanese"]),
        SubjectConfig(id="s2", subject_type="animal", animal_species="cat"),
    ]
    assert composer.compose_slots(subjects, config, "en") == [
        "walking together",
        "A Taiwanese woman AND A cat",
        "forest",
    ]
    zh = composer.compose_slots(subjects, config, "zh")
    assert zh[1] == "一個台灣女性 以及 一個貓"


def test_multi_subject_video_opens_with_camera_movement():
    config = GlobalConfig(
        task_mode="video_generation",
        camera_movement=["slow pan"],
        interaction="dancing",
        lighting=["neon lighting"],
    )
    subjects = [SubjectConfig(id="s1", gender="female"), SubjectConfig(id="s2", gender="male")]
    assert composer.compose_slots(subjects, config, "en") == [
        "slow pan",
        "dancing",
        "A woman AND A man",
        "neon lighting",
    ]


def test_interaction_ignored_for_single_subject():
    config = GlobalConfig(interaction="walking together")
    assert composer.compose_slots([SubjectConfig(gender="male")], config, "en") == ["A man"]


def test_zero_subjects_emit_global_slots_only():
    config = GlobalConfig(lighting=["neon lighting"], quality=["8k"])
    assert composer.compose_slots([], config, "en") == ["neon lighting", "8k"]
