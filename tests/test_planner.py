"""Tests for target planning."""

import base64
import logging

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from informergen.config import InformerGenConfig, NamingConfig, OutputConfig
from informergen.core.errors import GroupDerivationError, ObjectMetaNotFoundError, TagSyntaxError
from informergen.core.planner import (
    join_path,
    plan_targets,
    resolve_output_trees,
    summarize_targets,
)
from informergen.core.tags import is_informable_type
from informergen.models import (
    FactoryGenerator,
    GeneratorKind,
    GenericGenerator,
    GroupInterfaceGenerator,
    InformerGenerator,
    Member,
    PackageDescriptor,
    Target,
    TargetKind,
    TypeDescriptor,
    VersionInterfaceGenerator,
)

EXTERNAL_ROOT = "example.com/informers/externalversions"
INTERNAL_ROOT = "example.com/informers/internalversion"


def by_kind(targets: list[Target], kind: TargetKind) -> list[Target]:
    return [t for t in targets if t.kind == kind]


def informers(targets: list[Target]) -> list[InformerGenerator]:
    return [
        g for t in targets for g in t.generators if g.kind == GeneratorKind.INFORMER
    ]


class TestJoinPath:
    """Tests for join_path."""

    def test_joins_segments(self) -> None:
        assert join_path("out", "apps", "v1") == "out/apps/v1"

    def test_drops_empty_and_dot_roots(self) -> None:
        assert join_path("", "externalversions") == "externalversions"
        assert join_path(".", "externalversions") == "externalversions"


class TestResolveOutputTrees:
    """Tests for resolve_output_trees."""

    def test_split_trees(self, config: InformerGenConfig) -> None:
        internal, external = resolve_output_trees(config)
        assert internal.output_dir == "out/internalversion"
        assert internal.output_package == INTERNAL_ROOT
        assert internal.clientset_package == "example.com/clientset/internal"
        assert external.output_dir == "out/externalversions"
        assert external.output_package == EXTERNAL_ROOT
        assert external.clientset_package == "example.com/clientset/versioned"

    def test_single_directory_shares_root(self, config: InformerGenConfig) -> None:
        config = config.model_copy(
            update={
                "output": OutputConfig(
                    base="out", package="example.com/informers", single_directory=True
                )
            }
        )
        internal, external = resolve_output_trees(config)
        assert internal.output_dir == external.output_dir == "out"
        assert internal.output_package == external.output_package == "example.com/informers"


class TestScenarios:
    """End-to-end planning scenarios."""

    def test_external_deployment(self, make_package, make_type, config) -> None:
        deployment = make_type(
            "Deployment",
            "pkg/apps/v1",
            tags=["+genclient", "+genclient:onlyVerbs=list,watch,get"],
        )
        targets = plan_targets([make_package("pkg/apps/v1", deployment)], config)

        assert [t.kind for t in targets] == [
            TargetKind.VERSION_INTERFACE,
            TargetKind.FACTORY_INTERFACES,
            TargetKind.FACTORY,
            TargetKind.GROUP_INTERFACE,
        ]
        version = targets[0]
        assert version.package_name == "v1"
        assert version.package_path == f"{EXTERNAL_ROOT}/apps/v1"
        assert version.package_dir == "out/externalversions/apps/v1"
        assert version.generator_names() == ["interface", "deployment"]

        informer = version.generators[1]
        assert isinstance(informer, InformerGenerator)
        assert informer.group_package_name == "apps"
        assert informer.group_version.group == "apps"
        assert informer.group_version.version == "v1"
        assert informer.group_go_name == "Apps"
        assert informer.clientset_package == "example.com/clientset/versioned"
        assert informer.listers_package == "example.com/listers"
        assert informer.internal_interfaces_package == f"{EXTERNAL_ROOT}/internalinterfaces"

        group = by_kind(targets, TargetKind.GROUP_INTERFACE)[0]
        assert group.package_name == "apps"
        assert group.package_path == f"{EXTERNAL_ROOT}/apps"

    def test_internal_deployment(self, make_package, config) -> None:
        targets = plan_targets(
            [make_package("internal/apps", "Deployment", internal=True)], config
        )
        version = by_kind(targets, TargetKind.VERSION_INTERFACE)[0]
        informer = informers(targets)[0]

        assert informer.group_version.group == "apps"
        assert informer.group_version.version == ""
        assert informer.clientset_package == "example.com/clientset/internal"
        assert version.package_name == "internalversion"
        assert version.package_path == f"{INTERNAL_ROOT}/apps/internalversion"
        assert version.package_dir == "out/internalversion/apps/internalversion"
        assert all(t.package_path.startswith(INTERNAL_ROOT) for t in targets)

    def test_no_verbs_type_is_excluded(self, make_package, config) -> None:
        package = make_package(
            "pkg/apps/v1",
            "Deployment",
            tags=["+genclient", "+genclient:noVerbs", "+genclient:onlyVerbs=list,watch"],
        )
        assert plan_targets([package], config) == []

    def test_plural_exception_resolves_generic_accessor(self, make_package, config) -> None:
        naming = NamingConfig(plural_exceptions=["Endpoints=Endpoints"])
        config = config.model_copy(update={"naming": naming})
        targets = plan_targets([make_package("k8s.io/api/core/v1", "Endpoints", "Pod")], config)

        factory = by_kind(targets, TargetKind.FACTORY)[0]
        generic = factory.generators[1]
        assert isinstance(generic, GenericGenerator)
        assert generic.plural_exceptions == {"Endpoints": "Endpoints"}
        resources = {r.type_name: (r.plural, r.resource) for r in generic.resources}
        assert resources == {"Endpoints": ("Endpoints", "endpoints"), "Pod": ("Pods", "pods")}

    def test_without_plural_exception_uses_automatic_plural(self, make_package, config) -> None:
        config = config.model_copy(update={"naming": NamingConfig(plural_exceptions=[])})
        targets = plan_targets([make_package("k8s.io/api/core/v1", "Endpoints")], config)
        generic = by_kind(targets, TargetKind.FACTORY)[0].generators[1]
        assert isinstance(generic, GenericGenerator)
        assert generic.resources[0].plural == "Endpointses"

    def test_two_versions_share_one_group(self, make_package, config) -> None:
        targets = plan_targets(
            [
                make_package("k8s.io/api/apps/v1", "Deployment"),
                make_package("k8s.io/api/apps/v1beta1", "Deployment"),
            ],
            config,
        )
        versions = by_kind(targets, TargetKind.VERSION_INTERFACE)
        groups = by_kind(targets, TargetKind.GROUP_INTERFACE)

        assert [t.package_name for t in versions] == ["v1", "v1beta1"]
        assert len(groups) == 1
        group_gen = groups[0].generators[0]
        assert isinstance(group_gen, GroupInterfaceGenerator)
        assert [v.version for v in group_gen.group_versions.versions] == ["v1", "v1beta1"]


class TestPlanTargets:
    """Tests for plan_targets."""

    def test_empty_input(self, config) -> None:
        assert plan_targets([], config) == []

    def test_informers_are_ordered_by_private_name(self, make_package, config) -> None:
        targets = plan_targets(
            [make_package("k8s.io/api/apps/v1", "StatefulSet", "Deployment", "DaemonSet")], config
        )
        version = targets[0]
        assert version.generator_names() == ["interface", "daemonset", "deployment", "statefulset"]
        interface = version.generators[0]
        assert isinstance(interface, VersionInterfaceGenerator)
        assert [t.name for t in interface.types] == ["DaemonSet", "Deployment", "StatefulSet"]

    def test_header_attached_to_every_target(self, make_package, config) -> None:
        header = b"/* Licensed under the Apache License */\n"
        targets = plan_targets(
            [
                make_package("k8s.io/api/apps/v1", "Deployment"),
                make_package("internal/apps", "Deployment", internal=True),
            ],
            config,
            header,
        )
        assert targets
        assert all(t.header == header for t in targets)

    def test_external_tree_precedes_internal_tree(self, make_package, config) -> None:
        targets = plan_targets(
            [
                make_package("internal/apps", "Deployment", internal=True),
                make_package("k8s.io/api/apps/v1", "Deployment"),
            ],
            config,
        )
        kinds = [(t.kind, t.package_path.startswith(EXTERNAL_ROOT)) for t in targets]
        assert kinds == [
            (TargetKind.VERSION_INTERFACE, False),
            (TargetKind.VERSION_INTERFACE, True),
            (TargetKind.FACTORY_INTERFACES, True),
            (TargetKind.FACTORY, True),
            (TargetKind.GROUP_INTERFACE, True),
            (TargetKind.FACTORY_INTERFACES, False),
            (TargetKind.FACTORY, False),
            (TargetKind.GROUP_INTERFACE, False),
        ]

    def test_global_targets_layout(self, make_package, config) -> None:
        targets = plan_targets([make_package("k8s.io/api/apps/v1", "Deployment")], config)
        interfaces = by_kind(targets, TargetKind.FACTORY_INTERFACES)[0]
        factory = by_kind(targets, TargetKind.FACTORY)[0]

        assert interfaces.package_name == "internalinterfaces"
        assert interfaces.package_path == f"{EXTERNAL_ROOT}/internalinterfaces"
        assert interfaces.package_dir == "out/externalversions/internalinterfaces"
        assert interfaces.generator_names() == ["factory_interfaces"]
        assert interfaces.filter is None

        assert factory.package_name == "externalversions"
        assert factory.package_path == EXTERNAL_ROOT
        assert factory.generator_names() == ["factory", "generic"]
        factory_gen = factory.generators[0]
        assert isinstance(factory_gen, FactoryGenerator)
        assert factory_gen.group_go_names == {"apps": "Apps"}
        assert factory_gen.internal_interfaces_package == f"{EXTERNAL_ROOT}/internalinterfaces"

    def test_group_package_name_uses_first_dot_segment(self, make_package, config) -> None:
        targets = plan_targets(
            [make_package("k8s.io/api/networking.k8s.io/v1", "Ingress")], config
        )
        group = by_kind(targets, TargetKind.GROUP_INTERFACE)[0]
        assert group.package_name == "networking"
        assert group.package_path == f"{EXTERNAL_ROOT}/networking.k8s.io"

    def test_group_name_override(self, make_package, config) -> None:
        package = make_package(
            "k8s.io/api/apps/v1",
            "Deployment",
            comments=["+groupName=foo.bar", "+groupGoName=fooBar"],
        )
        targets = plan_targets([package], config)
        informer = informers(targets)[0]
        assert informer.group_version.group == "foo.bar"
        assert informer.group_go_name == "FooBar"
        assert informer.group_package_name == "apps"

    def test_group_and_version_targets_filter_like_classifier(
        self, make_package, make_type, config
    ) -> None:
        targets = plan_targets([make_package("k8s.io/api/apps/v1", "Deployment")], config)
        candidates = [
            make_type("Deployment"),
            make_type("Scale", tags=["+genclient", "+genclient:noVerbs"]),
            make_type("Spec", tags=()),
            make_type("Revision", tags=["+genclient", "+genclient:skipVerbs=watch"]),
        ]
        for target in by_kind(targets, TargetKind.VERSION_INTERFACE) + by_kind(
            targets, TargetKind.GROUP_INTERFACE
        ):
            assert [target.applies_to(t) for t in candidates] == [
                is_informable_type(t) for t in candidates
            ]
            assert [target.applies_to(t) for t in candidates] == [True, False, False, False]

    def test_empty_groups_produce_no_targets(self, make_package, config) -> None:
        packages = [
            make_package("k8s.io/api/apps/v1", "Scale", tags=["+genclient", "+genclient:noVerbs"]),
            make_package(
                "k8s.io/api/batch/v1", "Job", tags=["+genclient", "+genclient:skipVerbs=list"]
            ),
        ]
        assert plan_targets(packages, config) == []

    def test_skipped_packages_do_not_affect_other_groups(self, make_package, config) -> None:
        targets = plan_targets(
            [
                make_package(
                    "k8s.io/api/apps/v1", "Scale", tags=["+genclient", "+genclient:noVerbs"]
                ),
                make_package("k8s.io/api/batch/v1", "Job"),
            ],
            config,
        )
        groups = by_kind(targets, TargetKind.GROUP_INTERFACE)
        assert [g.package_name for g in groups] == ["batch"]

    def test_structural_error_aborts(self, make_type, config) -> None:
        package = PackageDescriptor(
            path="k8s.io/api/apps/v1", types=(make_type("Deployment", with_meta=False),)
        )
        with pytest.raises(ObjectMetaNotFoundError):
            plan_targets([package], config)

    def test_internal_path_without_group_aborts(self, make_package, config) -> None:
        with pytest.raises(GroupDerivationError):
            plan_targets([make_package("apps", "Deployment", internal=True)], config)

    def test_malformed_tag_aborts(self, make_package, config) -> None:
        with pytest.raises(TagSyntaxError):
            package = make_package("k8s.io/api/apps/v1", "Deployment", tags=["+genclient=no"])
            plan_targets([package], config)

    def test_misspelled_genclient_tag_aborts(self, make_package, config) -> None:
        tags = ["+genclient", "+genclient:noverbs"]
        package = make_package("k8s.io/api/apps/v1", "Deployment", tags=tags)
        with pytest.raises(TagSyntaxError, match=r"unknown tag detected: \+genclient:noverbs"):
            plan_targets([package], config)

    def test_planning_is_deterministic(self, make_package, config) -> None:
        packages = [
            make_package("k8s.io/api/batch/v1", "Job", "CronJob"),
            make_package("k8s.io/api/apps/v1", "StatefulSet", "Deployment"),
            make_package("internal/apps", "Deployment", internal=True),
        ]
        first = plan_targets(packages, config, b"header")
        second = plan_targets(packages, config, b"header")
        assert first == second
        assert [t.model_dump_json() for t in first] == [t.model_dump_json() for t in second]

    def test_single_directory_warns_when_trees_collide(self, make_package, config, caplog) -> None:
        config = config.model_copy(
            update={
                "output": OutputConfig(
                    base="out", package="example.com/informers", single_directory=True
                )
            }
        )
        with caplog.at_level(logging.WARNING, logger="informergen"):
            targets = plan_targets(
                [
                    make_package("k8s.io/api/apps/v1", "Deployment"),
                    make_package("internal/apps", "Deployment", internal=True),
                ],
                config,
            )
        assert "single_directory" in caplog.text
        factories = by_kind(targets, TargetKind.FACTORY)
        assert [f.package_path for f in factories] == ["example.com/informers"] * 2

    def test_skipped_packages_are_logged(self, make_package, config, caplog) -> None:
        with caplog.at_level(logging.DEBUG, logger="informergen"):
            plan_targets([make_package("k8s.io/api/apps/v1", "Spec", tags=())], config)
        assert "Skipping k8s.io/api/apps/v1" in caplog.text

    def test_serializes_without_filter(self, make_package, config) -> None:
        targets = plan_targets([make_package("k8s.io/api/apps/v1", "Deployment")], config, b"hdr")
        data = targets[0].model_dump(mode="json")
        assert "filter" not in data
        assert base64.urlsafe_b64decode(data["header"]) == b"hdr"
        assert data["generators"][1]["type"]["name"] == "Deployment"

    def test_non_utf8_header_round_trips_through_json(self, make_package, config) -> None:
        header = b"\xff\xfe// header\n"
        targets = plan_targets([make_package("k8s.io/api/apps/v1", "Deployment")], config, header)
        restored = Target.model_validate_json(targets[0].model_dump_json())
        assert restored.header == header


class TestSummarizeTargets:
    """Tests for summarize_targets."""

    def test_counts(self, make_package, config) -> None:
        targets = plan_targets(
            [
                make_package("k8s.io/api/apps/v1", "Deployment", "StatefulSet"),
                make_package("k8s.io/api/apps/v1beta1", "Deployment"),
            ],
            config,
        )
        summary = summarize_targets(targets)
        assert summary.counts == {
            "version_interface": 2,
            "factory_interfaces": 1,
            "factory": 1,
            "group_interface": 1,
        }
        assert summary.informer_count == 3
        assert summary.package_paths[0] == f"{EXTERNAL_ROOT}/apps/v1"


TAG_POOL = [
    "+genclient",
    "+genclient:noVerbs",
    "+genclient:onlyVerbs=get,list",
    "+genclient:skipVerbs=watch",
    "+genclient:noStatus",
    "+genclient:nonNamespaced",
]
META = Member(name="ObjectMeta", tags='json:"metadata,omitempty"')


@st.composite
def package_sets(draw) -> list[PackageDescriptor]:
    groups = draw(
        st.lists(st.sampled_from(["apps", "batch", "core", "policy"]), unique=True, max_size=3)
    )
    packages = []
    for group in groups:
        versions = st.lists(
            st.sampled_from(["v1", "v1beta1", "v2"]), unique=True, min_size=1, max_size=2
        )
        for version in draw(versions):
            path = f"k8s.io/api/{group}/{version}"
            names = draw(
                st.lists(
                    st.sampled_from(["Alpha", "Beta", "Gamma", "Delta", "Omega"]),
                    unique=True,
                    max_size=4,
                )
            )
            types = tuple(
                TypeDescriptor(
                    name=name,
                    package=path,
                    comment_lines=tuple(draw(st.lists(st.sampled_from(TAG_POOL), unique=True))),
                    members=(META,),
                )
                for name in names
            )
            packages.append(PackageDescriptor(path=path, types=types))
    return packages


def expected_eligible(t: TypeDescriptor) -> bool:
    tags = set(t.comment_lines)
    return (
        "+genclient" in tags
        and "+genclient:noVerbs" not in tags
        and "+genclient:onlyVerbs=get,list" not in tags
        and "+genclient:skipVerbs=watch" not in tags
    )


@settings(max_examples=50, deadline=None)
@given(package_sets())
def test_every_eligible_type_has_exactly_one_informer(packages: list[PackageDescriptor]) -> None:
    config = InformerGenConfig(output=OutputConfig(base="out", package="example.com/informers"))
    targets = plan_targets(packages, config)
    planned = [(g.type.package, g.type.name) for g in informers(targets)]

    for package in packages:
        for t in package.types:
            assert planned.count((t.package, t.name)) == (1 if expected_eligible(t) else 0)

    version_paths = {t.package_path for t in by_kind(targets, TargetKind.VERSION_INTERFACE)}
    assert len(version_paths) == len(by_kind(targets, TargetKind.VERSION_INTERFACE))
    assert plan_targets(packages, config) == targets
