"""Composition builder tests."""

from __future__ import annotations

from openapi_spec_dsl.schema_composition.discriminator_builder import DiscriminatorBuilder
from openapi_spec_dsl.schema_composition.schema_builder import (
    AllOfBuilder,
    AnyOfBuilder,
    OneOfBuilder,
    SchemaBuilder,
)
from openapi_spec_dsl.spec_model.schema_models import (
    Discriminator,
    Inline,
    Ref,
    Schema,
    SchemaType,
)


class Dog:
    pass


class Cat:
    pass


def _string_schema(schema: SchemaBuilder) -> None:
    schema.type = SchemaType.STRING


def test_one_of_builder_keeps_call_order_and_duplicates() -> None:
    references = OneOfBuilder().schema("Dog").schema(Cat).schema("Dog").build()

    assert references == (
        Ref("#/components/schemas/Dog"),
        Ref("#/components/schemas/Cat"),
        Ref("#/components/schemas/Dog"),
    )


def test_absolute_pointer_names_are_kept_unchanged() -> None:
    references = AllOfBuilder().schema("#/x/y").schema("Base").build()

    assert references == (Ref("#/x/y"), Ref("#/components/schemas/Base"))


def test_schema_block_targets_are_wrapped_inline() -> None:
    references = AnyOfBuilder().schema(_string_schema).schema(Dog).build()

    assert references == (
        Inline(Schema(type=SchemaType.STRING)),
        Ref("#/components/schemas/Dog"),
    )


def test_discriminator_without_mappings_has_null_mapping() -> None:
    discriminator = DiscriminatorBuilder("petType").build()

    assert discriminator == Discriminator(property_name="petType", mapping=None)


def test_discriminator_mapping_accepts_pointers_and_types_in_order() -> None:
    discriminator = (
        DiscriminatorBuilder("petType")
        .mapping("dog", Dog)
        .mapping("cat", "#/components/schemas/Feline")
        .build()
    )

    assert discriminator.mapping is not None
    assert list(discriminator.mapping.items()) == [
        ("dog", "#/components/schemas/Dog"),
        ("cat", "#/components/schemas/Feline"),
    ]


def test_or_and_and_combinators_build_reference_lists() -> None:
    dog = Ref("#/components/schemas/Dog")
    cat = Ref("#/components/schemas/Cat")
    fish = Inline(Schema(type=SchemaType.OBJECT))

    assert dog | cat == [dog, cat]
    assert dog | cat | fish == [dog, cat, fish]
    assert dog & fish == [dog, fish]
    assert [cat] & dog == [cat, dog]
