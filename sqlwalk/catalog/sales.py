"""
Walkthrough queries for sales.sqlite.

Tables:
    sales_pipeline: opportunity_id, sales_agent, product, account,
        deal_stage, engage_date, close_date, close_value
    sales_teams: sales_agent, manager, regional_office
    accounts: account, sector, year_established, revenue, employees,
        office_location, subsidiary_of
    intl_accounts: same columns as accounts, for accounts with offices
        outside the United States
    products: product, series, sales_price
"""

from .examples import QueryExample


PIPELINE = "sales_pipeline"
TEAMS = "sales_teams"
ACCOUNTS = "accounts"
INTL_ACCOUNTS = "intl_accounts"
PRODUCTS = "products"


SALES_EXAMPLES = (
    QueryExample(
        name="sales_won_count",
        database="sales",
        sql="""
            SELECT COUNT(*) AS won_deals
            FROM sales_pipeline
            WHERE deal_stage = 'Won'
        """,
        tables=(PIPELINE,),
        explanation="""
            WHERE runs before the aggregate, so COUNT(*) only sees the deals
            that were won.
        """,
        expected_row_count=1,
        expected_columns=("won_deals",),
    ),
    QueryExample(
        name="sales_won_by_agent",
        database="sales",
        sql="""
            SELECT sales_agent, COUNT(close_value) AS won_deals
            FROM sales_pipeline
            WHERE deal_stage = 'Won'
            GROUP BY sales_agent
            ORDER BY won_deals DESC
        """,
        tables=(PIPELINE,),
        explanation="""
            Adding GROUP BY turns the single count into one count per agent.
        """,
        expected_columns=("sales_agent", "won_deals"),
    ),
    QueryExample(
        name="sales_top_agents",
        database="sales",
        sql="""
            SELECT sales_agent, COUNT(close_value) AS won_deals
            FROM sales_pipeline
            WHERE deal_stage = 'Won'
            GROUP BY sales_agent
            HAVING COUNT(close_value) > 200
            ORDER BY won_deals DESC
        """,
        tables=(PIPELINE,),
        explanation="""
            HAVING filters groups after aggregation, the way WHERE filters
            rows before it. Only agents with more than 200 won deals remain.
        """,
        expected_columns=("sales_agent", "won_deals"),
    ),
    QueryExample(
        name="sales_value_stats",
        database="sales",
        sql="""
            SELECT SUM(close_value) AS total_value,
                   ROUND(AVG(close_value), 2) AS average_value,
                   MIN(close_value) AS smallest_deal,
                   MAX(close_value) AS largest_deal
            FROM sales_pipeline
            WHERE deal_stage = 'Won'
        """,
        tables=(PIPELINE,),
        explanation="""
            SUM, AVG, MIN and MAX ignore NULLs, just like COUNT(column).
        """,
        expected_row_count=1,
        expected_columns=("total_value", "average_value", "smallest_deal", "largest_deal"),
    ),
    QueryExample(
        name="sales_value_by_product",
        database="sales",
        sql="""
            SELECT product,
                   COUNT(*) AS won_deals,
                   ROUND(AVG(close_value), 2) AS average_value
            FROM sales_pipeline
            WHERE deal_stage = 'Won'
            GROUP BY product
            ORDER BY average_value DESC
        """,
        tables=(PIPELINE,),
        explanation="""
            Results can be sorted by an aggregate through its alias.
        """,
        expected_columns=("product", "won_deals", "average_value"),
    ),
    QueryExample(
        name="sales_inner_join",
        database="sales",
        sql="""
            SELECT p.opportunity_id, p.sales_agent, t.manager, t.regional_office
            FROM sales_pipeline AS p
            INNER JOIN sales_teams AS t
                ON p.sales_agent = t.sales_agent
            WHERE p.deal_stage = 'Won'
            ORDER BY p.opportunity_id
            LIMIT 20
        """,
        tables=(PIPELINE, TEAMS),
        explanation="""
            An inner join pairs each deal with the team row of its agent and
            keeps only pairs that match. Table aliases keep the column
            references short.
        """,
        expected_columns=("opportunity_id", "sales_agent", "manager", "regional_office"),
    ),
    QueryExample(
        name="sales_join_group",
        database="sales",
        sql="""
            SELECT t.regional_office, SUM(p.close_value) AS revenue
            FROM sales_pipeline AS p
            JOIN sales_teams AS t
                ON p.sales_agent = t.sales_agent
            WHERE p.deal_stage = 'Won'
            GROUP BY t.regional_office
            ORDER BY revenue DESC
        """,
        tables=(PIPELINE, TEAMS),
        explanation="""
            JOIN on its own means INNER JOIN. Joined rows can be grouped and
            aggregated like rows from a single table.
        """,
        expected_columns=("regional_office", "revenue"),
    ),
    QueryExample(
        name="sales_join_products",
        database="sales",
        sql="""
            SELECT p.opportunity_id, p.product, pr.series, pr.sales_price, p.close_value
            FROM sales_pipeline AS p
            JOIN products AS pr
                ON p.product = pr.product
            WHERE p.deal_stage = 'Won'
              AND p.close_value < pr.sales_price
            ORDER BY p.opportunity_id
        """,
        tables=(PIPELINE, PRODUCTS),
        explanation="""
            Once tables are joined, conditions can compare columns from both
            sides: these are deals closed below list price.
        """,
        expected_columns=("opportunity_id", "product", "series", "sales_price", "close_value"),
    ),
    QueryExample(
        name="sales_left_join",
        database="sales",
        sql="""
            SELECT a.account, a.sector, p.opportunity_id, p.deal_stage
            FROM accounts AS a
            LEFT JOIN sales_pipeline AS p
                ON a.account = p.account
            ORDER BY a.account, p.opportunity_id
        """,
        tables=(ACCOUNTS, PIPELINE),
        explanation="""
            A left outer join keeps every account. Accounts without any
            opportunity still appear once, with NULL in the pipeline columns.
        """,
        expected_columns=("account", "sector", "opportunity_id", "deal_stage"),
    ),
    QueryExample(
        name="sales_left_join_unmatched",
        database="sales",
        sql="""
            SELECT a.account, a.sector
            FROM accounts AS a
            LEFT JOIN sales_pipeline AS p
                ON a.account = p.account
            WHERE p.opportunity_id IS NULL
            ORDER BY a.account
        """,
        tables=(ACCOUNTS, PIPELINE),
        explanation="""
            Filtering a left join on a NULL right-hand key leaves exactly the
            left rows that had no match.
        """,
        expected_columns=("account", "sector"),
    ),
    QueryExample(
        name="sales_right_join_swapped",
        database="sales",
        sql="""
            SELECT p.opportunity_id, p.account, a.sector
            FROM sales_pipeline AS p
            LEFT JOIN accounts AS a
                ON a.account = p.account
            ORDER BY p.opportunity_id
        """,
        tables=(PIPELINE, ACCOUNTS),
        explanation="""
            "accounts RIGHT JOIN sales_pipeline" keeps every opportunity.
            Swapping the two tables around a LEFT JOIN gives the same rows
            on engines without RIGHT JOIN.
        """,
        expected_columns=("opportunity_id", "account", "sector"),
    ),
    QueryExample(
        name="sales_right_join_native",
        database="sales",
        sql="""
            SELECT p.opportunity_id, p.account, a.sector
            FROM accounts AS a
            RIGHT JOIN sales_pipeline AS p
                ON a.account = p.account
            ORDER BY p.opportunity_id
        """,
        tables=(ACCOUNTS, PIPELINE),
        explanation="""
            The same query written with RIGHT JOIN, available from SQLite
            3.39 onwards.
        """,
        expected_columns=("opportunity_id", "account", "sector"),
        requires_native_outer_join=True,
    ),
    QueryExample(
        name="sales_full_join_emulated",
        database="sales",
        sql="""
            SELECT a.account, p.opportunity_id
            FROM accounts AS a
            LEFT JOIN sales_pipeline AS p
                ON a.account = p.account
            UNION
            SELECT a.account, p.opportunity_id
            FROM sales_pipeline AS p
            LEFT JOIN accounts AS a
                ON a.account = p.account
            ORDER BY 1, 2
        """,
        tables=(ACCOUNTS, PIPELINE),
        explanation="""
            A full outer join keeps unmatched rows from both sides. Without
            native support it is the UNION of the two left joins, one in each
            direction; UNION drops the matched rows that both halves return.
        """,
        expected_columns=("account", "opportunity_id"),
    ),
    QueryExample(
        name="sales_full_join_native",
        database="sales",
        sql="""
            SELECT a.account, p.opportunity_id
            FROM accounts AS a
            FULL OUTER JOIN sales_pipeline AS p
                ON a.account = p.account
            ORDER BY 1, 2
        """,
        tables=(ACCOUNTS, PIPELINE),
        explanation="""
            FULL OUTER JOIN written directly, available from SQLite 3.39
            onwards.
        """,
        expected_columns=("account", "opportunity_id"),
        requires_native_outer_join=True,
    ),
    QueryExample(
        name="sales_subquery_where",
        database="sales",
        sql="""
            SELECT opportunity_id, sales_agent, close_value
            FROM sales_pipeline
            WHERE deal_stage = 'Won'
              AND close_value > (
                  SELECT AVG(close_value)
                  FROM sales_pipeline
                  WHERE deal_stage = 'Won'
              )
            ORDER BY close_value DESC
            LIMIT 10
        """,
        tables=(PIPELINE,),
        explanation="""
            A subquery that returns a single value can stand wherever a value
            can, here the average won deal.
        """,
        expected_columns=("opportunity_id", "sales_agent", "close_value"),
    ),
    QueryExample(
        name="sales_subquery_in",
        database="sales",
        sql="""
            SELECT sales_agent, COUNT(*) AS opportunities
            FROM sales_pipeline
            WHERE sales_agent IN (
                SELECT sales_agent
                FROM sales_teams
                WHERE regional_office = 'West'
            )
            GROUP BY sales_agent
            ORDER BY sales_agent
        """,
        tables=(PIPELINE, TEAMS),
        explanation="""
            A subquery returning one column can supply the list for IN.
        """,
        expected_columns=("sales_agent", "opportunities"),
    ),
    QueryExample(
        name="sales_subquery_from",
        database="sales",
        sql="""
            SELECT COUNT(*) AS agents,
                   ROUND(AVG(won_deals), 1) AS average_won_deals
            FROM (
                SELECT sales_agent, COUNT(*) AS won_deals
                FROM sales_pipeline
                WHERE deal_stage = 'Won'
                GROUP BY sales_agent
            ) AS per_agent
        """,
        tables=(PIPELINE,),
        explanation="""
            A subquery in FROM acts as a temporary table, which lets us
            aggregate an aggregate.
        """,
        expected_row_count=1,
        expected_columns=("agents", "average_won_deals"),
    ),
    QueryExample(
        name="sales_union",
        database="sales",
        sql="""
            SELECT account FROM accounts
            UNION
            SELECT account FROM intl_accounts
            ORDER BY account
        """,
        tables=(ACCOUNTS, INTL_ACCOUNTS),
        explanation="""
            UNION stacks the rows of two queries with matching columns and
            removes duplicates. ORDER BY at the end sorts the combined result.
        """,
        expected_columns=("account",),
    ),
    QueryExample(
        name="sales_union_all",
        database="sales",
        sql="""
            SELECT account, office_location FROM accounts
            UNION ALL
            SELECT account, office_location FROM intl_accounts
        """,
        tables=(ACCOUNTS, INTL_ACCOUNTS),
        explanation="""
            UNION ALL keeps duplicates, so accounts present in both tables
            show up twice.
        """,
        expected_columns=("account", "office_location"),
    ),
    QueryExample(
        name="sales_intersect",
        database="sales",
        sql="""
            SELECT account FROM accounts
            INTERSECT
            SELECT account FROM intl_accounts
            ORDER BY account
        """,
        tables=(ACCOUNTS, INTL_ACCOUNTS),
        explanation="""
            INTERSECT keeps only the rows returned by both queries.
        """,
        expected_columns=("account",),
    ),
    QueryExample(
        name="sales_except",
        database="sales",
        sql="""
            SELECT account FROM accounts
            EXCEPT
            SELECT account FROM intl_accounts
            ORDER BY account
        """,
        tables=(ACCOUNTS, INTL_ACCOUNTS),
        explanation="""
            EXCEPT keeps the rows of the first query that the second one does
            not return: here the accounts with no international office.
        """,
        expected_columns=("account",),
    ),
    QueryExample(
        name="sales_case",
        database="sales",
        sql="""
            SELECT account,
                   revenue,
                   CASE
                       WHEN revenue >= 1000 THEN 'large'
                       WHEN revenue >= 100 THEN 'medium'
                       ELSE 'small'
                   END AS size
            FROM accounts
            ORDER BY revenue DESC
        """,
        tables=(ACCOUNTS,),
        explanation="""
            WHEN branches are tried top to bottom, so each later branch only
            sees rows the earlier ones rejected.
        """,
        expected_columns=("account", "revenue", "size"),
    ),
)
