"""
Walkthrough queries for animals.sqlite.

The database holds one table, ``austin_animal_center_intakes``, with one
row per animal taken in by the Austin Animal Center: animal_id, name,
datetime, found_location, intake_type, intake_condition, animal_type,
sex_upon_intake, age_upon_intake, breed, color.
"""

from .examples import QueryExample


INTAKES = "austin_animal_center_intakes"


ANIMALS_EXAMPLES = (
    QueryExample(
        name="animals_select_all",
        database="animals",
        sql="""
            SELECT *
            FROM austin_animal_center_intakes
            LIMIT 10
        """,
        tables=(INTAKES,),
        explanation="""
            SELECT * returns every column. LIMIT keeps the output short while
            we get a feel for what the table contains.
        """,
        expected_row_count=10,
    ),
    QueryExample(
        name="animals_select_columns",
        database="animals",
        sql="""
            SELECT animal_id, name, animal_type
            FROM austin_animal_center_intakes
            LIMIT 10
        """,
        tables=(INTAKES,),
        explanation="""
            Listing column names after SELECT returns only those columns, in
            the order they are written.
        """,
        expected_row_count=10,
        expected_columns=("animal_id", "name", "animal_type"),
    ),
    QueryExample(
        name="animals_distinct_type",
        database="animals",
        sql="""
            SELECT DISTINCT animal_type
            FROM austin_animal_center_intakes
        """,
        tables=(INTAKES,),
        explanation="""
            DISTINCT removes duplicate rows from the output, leaving one row
            per kind of animal.
        """,
        expected_columns=("animal_type",),
    ),
    QueryExample(
        name="animals_distinct_profile",
        database="animals",
        sql="""
            SELECT DISTINCT animal_type, sex_upon_intake, age_upon_intake
            FROM austin_animal_center_intakes
        """,
        tables=(INTAKES,),
        explanation="""
            With several columns, DISTINCT applies to the combination: a row
            is dropped only when all three values repeat an earlier row. The
            full data set has 539 such combinations.
        """,
        expected_row_count=539,
        expected_columns=("animal_type", "sex_upon_intake", "age_upon_intake"),
    ),
    QueryExample(
        name="animals_where_equals",
        database="animals",
        sql="""
            SELECT animal_id, name, intake_type
            FROM austin_animal_center_intakes
            WHERE animal_type = 'Bird'
        """,
        tables=(INTAKES,),
        explanation="""
            WHERE keeps only the rows for which the condition is true. Text
            values are written in single quotes.
        """,
        expected_columns=("animal_id", "name", "intake_type"),
    ),
    QueryExample(
        name="animals_where_and_or",
        database="animals",
        sql="""
            SELECT animal_id, breed, intake_condition
            FROM austin_animal_center_intakes
            WHERE animal_type = 'Dog'
              AND (intake_condition = 'Injured' OR intake_condition = 'Sick')
        """,
        tables=(INTAKES,),
        explanation="""
            AND binds tighter than OR, so the parentheses are needed to keep
            the condition on animal_type applying to both intake conditions.
        """,
        expected_columns=("animal_id", "breed", "intake_condition"),
    ),
    QueryExample(
        name="animals_where_in",
        database="animals",
        sql="""
            SELECT animal_id, animal_type, intake_type
            FROM austin_animal_center_intakes
            WHERE intake_type IN ('Wildlife', 'Euthanasia Request')
        """,
        tables=(INTAKES,),
        explanation="""
            IN is shorthand for a chain of OR conditions on the same column.
        """,
        expected_columns=("animal_id", "animal_type", "intake_type"),
    ),
    QueryExample(
        name="animals_where_like",
        database="animals",
        sql="""
            SELECT animal_id, breed
            FROM austin_animal_center_intakes
            WHERE breed LIKE '%Pit Bull%'
        """,
        tables=(INTAKES,),
        explanation="""
            LIKE matches text against a pattern. % stands for any run of
            characters and _ for exactly one.
        """,
        expected_columns=("animal_id", "breed"),
    ),
    QueryExample(
        name="animals_where_between",
        database="animals",
        sql="""
            SELECT animal_id, animal_type, datetime
            FROM austin_animal_center_intakes
            WHERE datetime BETWEEN '2015-01-01' AND '2015-12-31 23:59:59'
        """,
        tables=(INTAKES,),
        explanation="""
            BETWEEN is inclusive at both ends. Dates stored as ISO text sort
            in calendar order, so plain text comparison works on them.
        """,
        expected_columns=("animal_id", "animal_type", "datetime"),
    ),
    QueryExample(
        name="animals_where_null",
        database="animals",
        sql="""
            SELECT animal_id, animal_type, found_location
            FROM austin_animal_center_intakes
            WHERE name IS NULL
        """,
        tables=(INTAKES,),
        explanation="""
            A missing value is NULL, and NULL is never equal to anything, not
            even NULL. Test for it with IS NULL rather than = NULL.
        """,
        expected_columns=("animal_id", "animal_type", "found_location"),
    ),
    QueryExample(
        name="animals_order_by",
        database="animals",
        sql="""
            SELECT animal_id, name, datetime
            FROM austin_animal_center_intakes
            WHERE animal_type = 'Cat'
            ORDER BY datetime DESC
            LIMIT 10
        """,
        tables=(INTAKES,),
        explanation="""
            ORDER BY sorts the output, ascending unless DESC is given. Without
            it the engine may return rows in any order.
        """,
        expected_columns=("animal_id", "name", "datetime"),
    ),
    QueryExample(
        name="animals_count",
        database="animals",
        sql="""
            SELECT COUNT(*) AS intakes
            FROM austin_animal_center_intakes
        """,
        tables=(INTAKES,),
        explanation="""
            COUNT(*) collapses the whole table into a single row holding the
            number of rows. AS gives the result column a readable name.
        """,
        expected_row_count=1,
        expected_columns=("intakes",),
    ),
    QueryExample(
        name="animals_count_distinct",
        database="animals",
        sql="""
            SELECT COUNT(DISTINCT breed) AS breeds,
                   COUNT(name) AS named_animals
            FROM austin_animal_center_intakes
        """,
        tables=(INTAKES,),
        explanation="""
            COUNT(column) skips NULLs, and COUNT(DISTINCT column) counts each
            different value once.
        """,
        expected_row_count=1,
        expected_columns=("breeds", "named_animals"),
    ),
    QueryExample(
        name="animals_group_by",
        database="animals",
        sql="""
            SELECT animal_type, COUNT(*) AS intakes
            FROM austin_animal_center_intakes
            GROUP BY animal_type
            ORDER BY intakes DESC
        """,
        tables=(INTAKES,),
        explanation="""
            GROUP BY splits the rows into one group per animal_type and the
            aggregate runs once per group.
        """,
        expected_columns=("animal_type", "intakes"),
    ),
    QueryExample(
        name="animals_case",
        database="animals",
        sql="""
            SELECT animal_id,
                   animal_type,
                   age_upon_intake,
                   CASE
                       WHEN age_upon_intake LIKE '%year%' THEN 'adult'
                       ELSE 'young'
                   END AS age_group
            FROM austin_animal_center_intakes
            LIMIT 20
        """,
        tables=(INTAKES,),
        explanation="""
            CASE computes a value row by row from the first WHEN that
            matches, falling back to ELSE.
        """,
        expected_columns=("animal_id", "animal_type", "age_upon_intake", "age_group"),
    ),
    QueryExample(
        name="animals_case_group",
        database="animals",
        sql="""
            SELECT CASE
                       WHEN age_upon_intake LIKE '%year%' THEN 'adult'
                       ELSE 'young'
                   END AS age_group,
                   COUNT(*) AS intakes
            FROM austin_animal_center_intakes
            GROUP BY age_group
            ORDER BY age_group
        """,
        tables=(INTAKES,),
        explanation="""
            A computed column can be grouped on like any other; here every
            intake falls into exactly one age group.
        """,
        expected_columns=("age_group", "intakes"),
    ),
)
