"""Template models and their conversion from project, entity and commit data."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Iterable

from modelhelper.config import Developer


@dataclass
class Column:
    """A column of a source entity."""

    name: str = ""
    description: str = ""
    data_type: str = ""
    length: int = 0
    precision: int = 0
    scale: int = 0
    use_length: bool = False
    use_precision: bool = False
    collation: str = ""
    references_column: str = ""
    references_table: str = ""
    is_foreign_key: bool = False
    is_primary_key: bool = False
    is_identity: bool = False
    is_nullable: bool = False
    is_ignored: bool = False
    is_deleted_marker: bool = False
    is_created_date: bool = False
    is_created_by_user: bool = False
    is_modified_date: bool = False
    is_modified_by_user: bool = False
    for_create: bool = False


@dataclass
class Index:
    """An index on a source entity."""

    name: str = ""
    is_clustered: bool = False
    is_primary_key: bool = False
    is_unique: bool = False


@dataclass
class Relation:
    """A relation between a source entity and another one."""

    name: str = ""
    schema: str = ""
    column_name: str = ""
    column_type: str = ""
    column_nullable: bool = False
    owner_column_name: str = ""
    owner_column_type: str = ""
    owner_column_nullable: bool = False
    constraint_name: str = ""
    has_synonym: bool = False
    synonym: str = ""
    columns: list[Column] = field(default_factory=list)


@dataclass
class Entity:
    """A table or view read from a source."""

    name: str = ""
    schema: str = ""
    type: str = ""
    alias: str = ""
    description: str = ""
    synonym: str = ""
    has_synonym: bool = False
    uses_identity_column: bool = False
    is_versioned: bool = False
    history_table: str = ""
    row_count: int = 0
    column_count: int = 0
    parent_relation_count: int = 0
    child_relation_count: int = 0
    columns: list[Column] = field(default_factory=list)
    indexes: list[Index] = field(default_factory=list)
    child_relations: list[Relation] = field(default_factory=list)
    parent_relations: list[Relation] = field(default_factory=list)


@dataclass
class SetupKey:
    """Per-key code settings of a project."""

    namespace: str = ""
    prefix: str = ""
    postfix: str = ""
    imports: list[str] = field(default_factory=list)
    inject: list[str] = field(default_factory=list)


@dataclass
class Inject:
    """Something a project injects into generated code."""

    name: str = ""
    property_name: str = ""
    method: str = ""


@dataclass
class FeatureToggle:
    """A standard feature a project may use."""

    use: bool = False
    namespace: str = ""
    imports: list[str] = field(default_factory=list)


@dataclass
class ProjectFeatures:
    """The standard features of a project."""

    auth: FeatureToggle | None = None
    logger: FeatureToggle | None = None
    tracing: FeatureToggle | None = None
    swagger: FeatureToggle | None = None
    metrics: FeatureToggle | None = None
    health: FeatureToggle | None = None
    api: FeatureToggle | None = None
    db: FeatureToggle | None = None


@dataclass
class CommonProjectFeature:
    """A project-defined feature."""

    use: bool = False
    namespace: str = ""
    imports: list[str] = field(default_factory=list)


@dataclass
class ProjectConfig:
    """The configuration of a project."""

    name: str = ""
    version: str = ""
    default_key: str = ""
    options: dict[str, str] = field(default_factory=dict)
    language: str = ""
    header: str = ""
    custom: Any = None
    description: str = ""
    setup: dict[str, SetupKey] = field(default_factory=dict)
    inject: dict[str, Inject] = field(default_factory=dict)
    owner_name: str = ""
    features: ProjectFeatures | None = None
    custom_features: dict[str, CommonProjectFeature] = field(default_factory=dict)
    locations: dict[str, str] = field(default_factory=dict)
    directory: str = ""
    use_header: bool = False
    root_namespace: str = ""


@dataclass
class InjectSection:
    name: str = ""
    property_name: str = ""


@dataclass
class ProjectSection:
    exists: bool = False
    name: str = ""
    owner: str = ""


@dataclass
class FeatureModel:
    use_logger: bool = False
    use_api: bool = False
    use_db: bool = False


@dataclass
class BasicModel:
    """The fields every template model shares."""

    name: str = ""
    root_namespace: str = ""
    namespace: str = ""
    postfix: str = ""
    prefix: str = ""
    module_level_variable_prefix: str = ""
    inject: list[InjectSection] = field(default_factory=list)
    imports: list[str] = field(default_factory=list)
    project: ProjectSection = field(default_factory=ProjectSection)
    feature: FeatureModel = field(default_factory=FeatureModel)
    developer: Developer = field(default_factory=Developer)
    options: dict[str, str] = field(default_factory=dict)
    page_header: str = ""


@dataclass
class EntityColumnProps:
    name: str = ""
    data_type: str = ""
    is_nullable: bool = False


@dataclass
class EntityColumnModel:
    name: str = ""
    name_without_prefix: str = ""
    description: str = ""
    has_description: bool = False
    has_prefix: bool = False
    data_type: str = ""
    length: int = 0
    precision: int = 0
    scale: int = 0
    use_length: bool = False
    use_precision: bool = False
    collation: str = ""
    references_column: str = ""
    references_table: str = ""
    is_foreign_key: bool = False
    is_primary_key: bool = False
    is_identity: bool = False
    is_nullable: bool = False
    is_ignored: bool = False
    is_deleted_marker: bool = False
    is_created_date: bool = False
    is_created_by_user: bool = False
    is_modified_date: bool = False
    is_modified_by_user: bool = False
    for_create: bool = False
    is_first: bool = False
    is_last: bool = False


@dataclass
class EntityRelationModel:
    name: str = ""
    schema: str = ""
    owner_name: str = ""
    owner_schema: str = ""
    owner_column: EntityColumnProps = field(default_factory=EntityColumnProps)
    related_column: EntityColumnProps = field(default_factory=EntityColumnProps)
    name_without_prefix: str = ""
    has_prefix: bool = False
    has_description: bool = False
    has_synonym: bool = False
    synonym: str = ""
    model_name: str = ""
    columns: list[EntityColumnModel] = field(default_factory=list)
    primary_keys: list[EntityColumnModel] = field(default_factory=list)
    non_primary_columns: list[EntityColumnModel] = field(default_factory=list)
    foreign_keys: list[EntityColumnModel] = field(default_factory=list)


@dataclass
class EntityModel(BasicModel):
    schema: str = ""
    type: str = ""
    alias: str = ""
    description: str = ""
    has_description: bool = False
    has_prefix: bool = False
    name_without_prefix: str = ""
    columns: list[EntityColumnModel] = field(default_factory=list)
    non_primary_columns: list[EntityColumnModel] = field(default_factory=list)
    primary_keys: list[EntityColumnModel] = field(default_factory=list)
    foreign_keys: list[EntityColumnModel] = field(default_factory=list)
    used_as_columns: list[EntityColumnModel] = field(default_factory=list)
    parents: list[EntityRelationModel] = field(default_factory=list)
    children: list[EntityRelationModel] = field(default_factory=list)
    has_parents: bool = False
    has_children: bool = False
    uses_identity_column: bool = False
    has_synonym: bool = False
    synonym: str = ""
    model_name: str = ""


@dataclass
class EntityListModel(BasicModel):
    entities: list[EntityModel] = field(default_factory=list)


@dataclass
class NameModel(BasicModel):
    pass


@dataclass
class CustomModel(BasicModel):
    custom: Any = None


@dataclass
class Author:
    name: str = ""
    commits: int = 0
    first: datetime | None = None
    last: datetime | None = None


@dataclass
class Commit:
    type: str = ""
    scope: str = ""
    title: str = ""
    body: str = ""
    author: str = ""
    is_breaking_change: bool = False


@dataclass
class CommitHistory:
    name: str = ""
    messages: dict[str, list[Commit]] = field(default_factory=dict)
    authors: dict[str, Author] = field(default_factory=dict)


@dataclass
class CommitModel(BasicModel):
    all_conventional_commits: dict[str, list[Commit]] = field(default_factory=dict)
    features: list[Commit] = field(default_factory=list)
    fixes: list[Commit] = field(default_factory=list)
    refactors: list[Commit] = field(default_factory=list)
    docs: list[Commit] = field(default_factory=list)
    performance: list[Commit] = field(default_factory=list)
    tests: list[Commit] = field(default_factory=list)
    builds: list[Commit] = field(default_factory=list)
    ci: list[Commit] = field(default_factory=list)
    chores: list[Commit] = field(default_factory=list)
    reverts: list[Commit] = field(default_factory=list)
    breaking_changes: list[Commit] = field(default_factory=list)
    authors: dict[str, Author] = field(default_factory=dict)
    has_features: bool = False
    has_fixes: bool = False
    has_refactors: bool = False
    has_breaking_changes: bool = False
    has_authors: bool = False


def coalesce_string(*args: str) -> str:
    """Return the first non-empty string, or an empty one."""
    return next((value for value in args if value), "")


def to_column_section(column: Column, entity_name: str) -> EntityColumnModel:
    """Convert a source column to its template model."""
    return EntityColumnModel(
        name=column.name,
        name_without_prefix=column.name.removeprefix(entity_name),
        description=column.description,
        has_description=bool(column.description),
        has_prefix=column.name.startswith(entity_name),
        data_type=column.data_type,
        length=column.length,
        precision=column.precision,
        scale=column.scale,
        use_length=column.use_length,
        use_precision=column.use_precision,
        collation=column.collation,
        references_column=column.references_column,
        references_table=column.references_table,
        is_foreign_key=column.is_foreign_key,
        is_primary_key=column.is_primary_key,
        is_identity=column.is_identity,
        is_nullable=column.is_nullable,
        is_ignored=column.is_ignored,
        is_deleted_marker=column.is_deleted_marker,
        is_created_date=column.is_created_date,
        is_created_by_user=column.is_created_by_user,
        is_modified_date=column.is_modified_by_user,
        is_modified_by_user=column.is_modified_by_user,
        for_create=column.for_create,
    )


def _fill_columns(target: Any, columns: Iterable[Column], owner_name: str) -> None:
    columns = list(columns)
    last = len(columns) - 1
    for position, column in enumerate(columns):
        section = to_column_section(column, owner_name)
        section.is_first = position == 0
        section.is_last = position == last
        target.columns.append(section)
        if column.is_primary_key:
            target.primary_keys.append(section)
        else:
            target.non_primary_columns.append(section)
        if column.is_foreign_key:
            target.foreign_keys.append(section)


def _child_relation(relation: Relation, owner: EntityModel) -> EntityRelationModel:
    child = EntityRelationModel(
        name=relation.name,
        schema=relation.schema,
        owner_name=owner.name,
        owner_schema=owner.schema,
        related_column=EntityColumnProps(
            relation.column_name, relation.column_type, relation.column_nullable
        ),
        owner_column=EntityColumnProps(
            relation.owner_column_name,
            relation.owner_column_type,
            relation.owner_column_nullable,
        ),
        name_without_prefix=relation.name.removeprefix(owner.name),
        has_prefix=relation.name.startswith(owner.name),
        has_synonym=relation.has_synonym,
        synonym=relation.synonym if relation.has_synonym else "",
        model_name=coalesce_string(relation.synonym, relation.name),
    )
    _fill_columns(child, relation.columns or [], child.name)
    return child


def _parent_relation(relation: Relation, owner: EntityModel) -> EntityRelationModel:
    return EntityRelationModel(
        name=relation.name,
        schema=relation.schema,
        has_description=False,
        has_synonym=relation.has_synonym,
        synonym=relation.synonym if relation.has_synonym else "",
        owner_column=EntityColumnProps(
            relation.column_name, relation.column_type, relation.column_nullable
        ),
        related_column=EntityColumnProps(
            relation.owner_column_name,
            relation.owner_column_type,
            relation.owner_column_nullable,
        ),
        model_name=coalesce_string(relation.synonym, relation.name),
        name_without_prefix=relation.name.removeprefix(owner.name),
        has_prefix=relation.name.startswith(owner.name),
    )


def to_entity_section(entity: Entity) -> EntityModel:
    """Convert a source entity to its template model, without project data."""
    out = EntityModel(
        name=entity.name,
        schema=entity.schema,
        type=entity.type,
        alias=entity.alias,
        description=entity.description,
        has_description=bool(entity.description),
        has_prefix=False,
        name_without_prefix="",
        uses_identity_column=entity.uses_identity_column,
        has_synonym=entity.has_synonym,
        synonym=entity.synonym,
        model_name=coalesce_string(entity.synonym, entity.name),
    )
    _fill_columns(out, entity.columns, out.name)
    out.children = [_child_relation(r, out) for r in entity.child_relations]
    out.parents = [_parent_relation(r, out) for r in entity.parent_relations]
    return out


def _empty_project() -> ProjectConfig:
    return ProjectConfig()


def _shared_fields(base: BasicModel, with_root_namespace: bool = True) -> dict[str, Any]:
    fields = {
        "namespace": base.namespace,
        "postfix": base.postfix,
        "prefix": base.prefix,
        "module_level_variable_prefix": base.module_level_variable_prefix,
        "inject": base.inject,
        "imports": base.imports,
        "project": base.project,
        "feature": base.feature,
        "developer": base.developer,
        "options": base.options,
        "page_header": base.page_header,
    }
    if with_root_namespace:
        fields["root_namespace"] = base.root_namespace
    return fields


class CodeModelConverter:
    """Builds the models that code templates are rendered with."""

    def to_feature_model(self, project: ProjectConfig) -> tuple[FeatureModel, list[str]]:
        """Return the feature model of a project and the imports it adds."""
        return FeatureModel(), []

    def to_basic_model(
        self, identifier: str, language: str, project: ProjectConfig | None
    ) -> BasicModel:
        """Build the shared model for ``identifier`` from a project, or an empty one."""
        if project is None:
            project = _empty_project()

        model = BasicModel(
            name=project.name,
            project=ProjectSection(exists=True, name=project.name, owner=project.owner_name),
            page_header=project.header,
        )
        if project.options:
            model.options = dict(project.options)

        feature, _ = self.to_feature_model(project)
        model.feature = feature

        if project.root_namespace:
            model.root_namespace = project.root_namespace

        if identifier:
            setup = project.setup.get(identifier)
            if setup is not None:
                model.root_namespace = project.root_namespace
                model.inject = [
                    InjectSection(name=item.name, property_name=item.property_name)
                    for item in (project.inject.get(key) for key in setup.inject)
                    if item is not None
                ]
                model.postfix = setup.postfix
                model.prefix = setup.prefix
                model.namespace = setup.namespace
        return model

    def to_entity_model(
        self,
        key: str,
        language: str,
        project: ProjectConfig | None,
        entity: Entity | None,
    ) -> EntityModel:
        """Build the model for a single entity."""
        base = self.to_basic_model(key, language, project)
        section = to_entity_section(entity) if entity is not None else EntityModel()
        return EntityModel(
            **_shared_fields(base),
            name=section.name,
            schema=section.schema,
            type=section.type,
            alias=section.alias,
            description=section.description,
            has_description=bool(section.description),
            has_prefix=False,
            name_without_prefix="",
            columns=section.columns,
            non_primary_columns=section.non_primary_columns,
            parents=section.parents,
            children=section.children,
            primary_keys=section.primary_keys,
            foreign_keys=section.foreign_keys,
            used_as_columns=section.used_as_columns,
            uses_identity_column=section.uses_identity_column,
            has_synonym=section.has_synonym,
            synonym=section.synonym,
            model_name=section.model_name,
            has_children=bool(section.children),
            has_parents=bool(section.parents),
        )

    def to_entity_list_model(
        self,
        identifier: str,
        language: str,
        project: ProjectConfig | None,
        entities: Iterable[Entity] | None,
    ) -> EntityListModel:
        """Build the model for a list of entities."""
        base = self.to_basic_model(identifier, language, project)
        return EntityListModel(
            **_shared_fields(base, with_root_namespace=False),
            entities=[to_entity_section(entity) for entity in entities or []],
        )

    def to_name_model(
        self, key: str, language: str, project: ProjectConfig | None, name: str
    ) -> NameModel:
        """Build a model that carries only a name."""
        base = self.to_basic_model(key, language, project)
        return NameModel(**_shared_fields(base), name=name)

    def to_custom_model(
        self, key: str, language: str, project: ProjectConfig | None, custom: Any
    ) -> CustomModel:
        """Build a model that carries arbitrary custom data."""
        base = self.to_basic_model(key, language, project)
        return CustomModel(**_shared_fields(base), custom=custom)

    def to_commit_history_model(
        self,
        key: str,
        language: str,
        project: ProjectConfig | None,
        commit_history: CommitHistory,
    ) -> CommitModel:
        """Build a changelog model from a commit history."""
        base = self.to_basic_model(key, language, project)
        messages = commit_history.messages

        def of(kind: str) -> list[Commit]:
            return list(messages.get(kind) or [])

        model = CommitModel(
            **_shared_fields(base),
            name=commit_history.name,
            all_conventional_commits=messages,
            features=of("feat"),
            fixes=of("fix"),
            refactors=of("refactor"),
            docs=of("docs"),
            performance=of("perf"),
            tests=of("tests"),
            builds=of("builds"),
            ci=of("ci"),
            chores=of("chores"),
            reverts=of("reverts"),
            breaking_changes=[
                commit
                for commits in messages.values()
                for commit in commits
                if commit.is_breaking_change
            ],
            authors=commit_history.authors,
        )
        model.has_features = bool(model.features)
        model.has_refactors = bool(model.refactors)
        model.has_fixes = bool(model.fixes)
        model.has_breaking_changes = bool(model.breaking_changes)
        model.has_authors = bool(model.authors)
        return model