import re
from pathlib import Path

import pytest

from photoresize.base.conflict_resolver import ConflictDecision, ConflictResolver
from photoresize.models.naming_policy import NamingPolicy
from photoresize.services.conflict_resolvers import (AskPerFileResolver, OverwriteResolver,
                                                     SkipResolver)
from photoresize.services.name_planner import NamePlanner

class RecordingResolver(ConflictResolver):
    def __init__(self, decision):
        super().__init__()
        self.decision = decision
        self.seen = []

    def resolve(self, existing_path):
        self.seen.append(existing_path)
        return self.decision

def test_plain_name_is_unchanged(tmp_path):
    planner = NamePlanner(NamingPolicy())

    assert planner.make_output_path(Path('/src/photo.jpg'), tmp_path) == tmp_path / 'photo.jpg'

def test_postfix_goes_before_extension(tmp_path):
    planner = NamePlanner(NamingPolicy(postfix='small'))

    output = planner.make_output_path(Path('/src/photo.jpg'), tmp_path)

    assert output.name == 'photo.small.jpg'
    assert output.parent == tmp_path

def test_extension_case_is_preserved():
    planner = NamePlanner(NamingPolicy(postfix='web'))

    assert planner.make_output_name(Path('IMG 001.JPG')) == 'IMG 001.web.JPG'

def test_web_safe_rename():
    planner = NamePlanner(NamingPolicy(web_safe_rename=True))

    assert planner.make_output_name(Path('My Holiday (2).jpg')) == 'My_Holiday__2_.jpg'

def test_web_safe_postfix_is_not_rewritten():
    planner = NamePlanner(NamingPolicy(web_safe_rename=True, postfix='small'))

    assert planner.make_output_name(Path('a-b.png')) == 'a_b.small.png'

@pytest.mark.parametrize('name', ['plain.jpg', 'with space.jpg', 'café-2024!.png', '...odd.jpg'])
def test_web_safe_stem_is_stable_and_clean(name):
    planner = NamePlanner(NamingPolicy(web_safe_rename=True))

    first = Path(planner.make_output_name(Path(name))).stem
    second = Path(planner.make_output_name(Path(name))).stem

    assert first == second
    assert re.fullmatch(r'[A-Za-z0-9_]*', first)

def test_resolver_not_consulted_without_collision(tmp_path):
    resolver = RecordingResolver(ConflictDecision.SKIP)
    planner = NamePlanner(NamingPolicy(), resolver)

    assert planner.make_output_path(Path('/src/new.jpg'), tmp_path) == tmp_path / 'new.jpg'
    assert resolver.seen == []

def test_existing_file_skipped_by_default(tmp_path):
    (tmp_path / 'photo.jpg').write_bytes(b'old')
    planner = NamePlanner(NamingPolicy(overwrite=False))

    assert isinstance(planner.resolver, SkipResolver)
    assert planner.make_output_path(Path('/src/photo.jpg'), tmp_path) is None

def test_existing_file_replaced_with_overwrite(tmp_path):
    (tmp_path / 'photo.jpg').write_bytes(b'old')
    planner = NamePlanner(NamingPolicy(overwrite=True))

    assert isinstance(planner.resolver, OverwriteResolver)
    assert planner.make_output_path(Path('/src/photo.jpg'), tmp_path) == tmp_path / 'photo.jpg'

def test_collision_checked_on_final_name(tmp_path):
    (tmp_path / 'photo.jpg').write_bytes(b'old')
    resolver = RecordingResolver(ConflictDecision.SKIP)
    planner = NamePlanner(NamingPolicy(postfix='small'), resolver)

    assert planner.make_output_path(Path('/src/photo.jpg'), tmp_path).name == 'photo.small.jpg'
    assert resolver.seen == []

def test_plan_jobs_keeps_skipped_inputs(tmp_path):
    (tmp_path / 'b.jpg').write_bytes(b'old')
    inputs = [Path('/src/a.jpg'), Path('/src/b.jpg'), Path('/src/c.jpg')]

    result = NamePlanner(NamingPolicy()).plan_jobs(inputs, tmp_path)

    assert not result.aborted
    assert [job.input_path for job in result.jobs] == inputs
    assert [job.output_path for job in result.jobs] == [tmp_path / 'a.jpg', None, tmp_path / 'c.jpg']
    assert result.skipped_count == 1
    assert len(result.active_jobs) == 2

def test_abort_discards_plan(tmp_path):
    (tmp_path / 'b.jpg').write_bytes(b'old')
    resolver = RecordingResolver(ConflictDecision.ABORT)
    inputs = [Path('/src/a.jpg'), Path('/src/b.jpg'), Path('/src/c.jpg')]

    result = NamePlanner(NamingPolicy(), resolver).plan_jobs(inputs, tmp_path)

    assert result.aborted
    assert result.jobs == []
    assert resolver.seen == [tmp_path / 'b.jpg']

def test_interactive_abort_stops_further_prompts(tmp_path, canned_prompt):
    for name in ('a.jpg', 'b.jpg'):
        (tmp_path / name).write_bytes(b'old')
    prompt = canned_prompt('n', 'y')
    planner = NamePlanner(NamingPolicy(), AskPerFileResolver(prompt))

    result = planner.plan_jobs([Path('/src/a.jpg'), Path('/src/b.jpg')], tmp_path)

    assert result.aborted
    assert len(prompt.asked) == 2
