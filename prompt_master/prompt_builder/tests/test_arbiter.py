import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[3]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from prompt_master.prompt_builder import arbiter
from prompt_master.prompt_builder.models import GlobalConfig, ReferenceImage, SubjectConfig


def _editing(**fields):
    return GlobalConfig(task_mode="editing", **fields)


def _styled_subject(**fields):
    return SubjectConfig(
        gender="female",
        nationality=["Japanese"],
        hair_style=["long straight hair"],
        clothing=["leather jacket"],
        action=["sitting"],
        **fields,
    )


def test_full_instruction_order():
    subject = _styled_subject(role=["doctor"], accessories=["wearing scarf"], hands=["holding a book"], mood=["mysterious"])
    config = _editing(
        reference_images=[ReferenceImage(id="r1", url="https://example.com/a.png", intent="high_denoising")],
        environment=["forest"],
        art_style=["Oil painting"],
        lighting=["golden hour"],
        color_palette="earth tones",
    )
    assert arbiter.build_instructions(subject, config, "en") == [
        "Completely reimagine the image.",
        "Change the character's appearance to be Japanese woman.",
        "Change the role to a doctor.",
        "Change hair to long straight hair.",
        "Change the outfit to leather jacket.",
        "Add wearing scarf to the character.",
        "Change pose to sitting.",
        "Character is holding a book.",
        "Change the background to forest.",
        "Transform the style to Oil painting.",
        "Make the character look mysterious.",
        "Apply golden hour.",
        "Use a earth tones.",
    ]


def test_keep_composition_reference_comes_first():
    config = _editing(
        reference_images=[ReferenceImage(id="r1", url="https://example.com/a.png", intent="keep_composition")]
    )
    instructions = arbiter.build_instructions(_styled_subject(), config, "en")
    assert instructions[0] == "Retain the original composition and pose."


def test_general_intent_adds_nothing():
    config = _editing(reference_images=[ReferenceImage(id="r1", url="https://example.com/a.png")])
    assert arbiter.intent_instructions(config, "en") == []


def test_facial_features_preservation_suppresses_identity():
    config = _editing(preservation=["facial features"])
    instructions = arbiter.build_instructions(_styled_subject(), config, "en")
    assert instructions[0] == "Ensure the facial features remain unchanged."
    assert not any(sentence.startswith("Change the character's appearance") for sentence in instructions)


def test_each_preservation_flag_gates_its_instructions():
    subject = _styled_subject()
    config = _editing(
        preservation=["hair style", "clothing", "image composition", "background environment", "lighting conditions", "color palette"],
        environment=["forest"],
        composition=["rule of thirds"],
        lighting=["golden hour"],
        color_palette="earth tones",
    )
    instructions = arbiter.build_instructions(subject, config, "en")
    assert instructions == [
        "Ensure the hair style, clothing, image composition, background environment, lighting conditions, color palette remain unchanged.",
        "Change the character's appearance to be Japanese woman.",
    ]


def test_identity_omits_gender_when_unset():
    subject = SubjectConfig(nationality=["Korean"], face_shape=["oval face"])
    assert arbiter.subject_instructions(subject, _editing(), "en") == [
        "Change the character's appearance to be Korean oval face."
    ]


def test_non_human_identity_sentence():
    cat = SubjectConfig(subject_type="animal", animal_species="cat", animal_fur=["black fur"])
    assert arbiter.subject_instructions(cat, _editing(), "en") == ["Change the subject to black fur cat."]
    assert arbiter.subject_instructions(cat, _editing(preservation=["facial features"]), "en") == []


def test_chinese_sentences():
    config = _editing(preservation=["clothing"], environment=["beach"])
    instructions = arbiter.build_instructions(_styled_subject(), config, "zh")
    assert instructions == [
        "確保服裝保持不變。",
        "將角色外觀改為日本女性。",
        "將髮型改為長直髮。",
        "將姿勢改為坐姿。",
        "將背景改為海灘。",
    ]


def test_multi_subject_instructions_use_locators():
    subjects = [
        SubjectConfig(id="s1", clothing=["tailored suit"]),
        SubjectConfig(id="s2", subject_type="vehicle"),
        SubjectConfig(id="s3", hair_style=["buzz cut"]),
    ]
    config = _editing(environment=["office interior"])
    assert arbiter.build_scene_instructions(subjects, config, "en") == [
        "For subject 1:",
        "Change the outfit to tailored suit.",
        "For subject 3:",
        "Change hair to buzz cut.",
        "Change the background to office interior.",
    ]


def test_scene_only_instructions_without_subjects():
    config = _editing(environment=["beach"], aspect_ratio=["aspect ratio 1:1"])
    assert arbiter.build_scene_instructions([], config, "en") == [
        "Change the background to beach.",
        "Adjust composition to aspect ratio 1:1.",
    ]


def test_instruction_block_joins_with_single_space():
    assert arbiter.instruction_block(["One.", "", "Two."]) == "One. Two."
