"""Create recipe sharing schema

Revision ID: 5a1c0e7d2b94
Revises:
Create Date: 2025-06-03 20:14:05.120331

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '5a1c0e7d2b94'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

# (taxonomy table, junction table, junction column)
TAXONOMIES = [
    ('categories', 'recipe_categories', 'category_id'),
    ('cuisines', 'recipe_cuisines', 'cuisine_id'),
    ('seasons', 'recipe_seasons', 'season_id'),
    ('dietary_restrictions', 'recipe_dietary_restrictions', 'dietary_restriction_id'),
    ('cooking_methods', 'recipe_cooking_methods', 'cooking_method_id'),
    ('main_ingredients', 'recipe_main_ingredients', 'main_ingredient_id'),
    ('difficulty_levels', 'recipe_difficulty_levels', 'difficulty_level_id'),
    ('occasions', 'recipe_occasions', 'occasion_id'),
]


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    ]


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        'users',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('username', sa.String(50), nullable=False, unique=True),
        sa.Column('email', sa.String(255), nullable=False, unique=True),
        sa.Column('password_hash', sa.String(255), nullable=False),
        sa.Column('is_admin', sa.Boolean(), server_default=sa.false(), nullable=False),
        sa.Column('first_name', sa.String(255)),
        sa.Column('last_name', sa.String(255)),
        sa.Column('bio', sa.Text()),
        sa.Column('profile_picture_url', sa.String(255)),
        *_timestamps(),
    )

    op.create_table(
        'recipes',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False),
        sa.Column('title', sa.String(255), nullable=False),
        sa.Column('description', sa.Text()),
        sa.Column('instructions', sa.Text(), nullable=False),
        sa.Column('prep_time_minutes', sa.Integer()),
        sa.Column('cook_time_minutes', sa.Integer()),
        sa.Column('servings', sa.Integer()),
        sa.Column('image_url', sa.String(255)),
        sa.Column('video_url', sa.String(255)),
        *_timestamps(),
    )
    op.create_index('ix_recipes_user_id', 'recipes', ['user_id'])
    op.create_index('ix_recipes_title', 'recipes', ['title'])
    op.create_index('ix_recipes_created_at', 'recipes', ['created_at'])

    op.create_table(
        'ingredients',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('name', sa.String(255), nullable=False),
    )
    op.create_index('ix_ingredients_name', 'ingredients', ['name'], unique=True)

    op.create_table(
        'recipe_ingredients',
        sa.Column('recipe_id', sa.Integer(), sa.ForeignKey('recipes.id', ondelete='CASCADE'), primary_key=True),
        sa.Column('ingredient_id', sa.Integer(), sa.ForeignKey('ingredients.id', ondelete='CASCADE'), primary_key=True),
        sa.Column('quantity', sa.Numeric(10, 2), nullable=False),
        sa.Column('unit', sa.String(50), nullable=False),
        sa.Column('notes', sa.String(255)),
    )

    op.create_table(
        'user_favorites',
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id', ondelete='CASCADE'), primary_key=True),
        sa.Column('recipe_id', sa.Integer(), sa.ForeignKey('recipes.id', ondelete='CASCADE'), primary_key=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    )

    op.create_table(
        'recipe_ratings',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False),
        sa.Column('recipe_id', sa.Integer(), sa.ForeignKey('recipes.id', ondelete='CASCADE'), nullable=False),
        sa.Column('rating', sa.Integer(), nullable=False),
        *_timestamps(),
        sa.UniqueConstraint('user_id', 'recipe_id', name='uq_recipe_ratings_user_recipe'),
        sa.CheckConstraint('rating >= 1 AND rating <= 5', name='rating_check'),
    )
    op.create_index('ix_recipe_ratings_recipe_id', 'recipe_ratings', ['recipe_id'])

    for table, junction, column in TAXONOMIES:
        columns = [
            sa.Column('id', sa.Integer(), primary_key=True),
            sa.Column('name', sa.String(255), nullable=False, unique=True),
        ]
        if table == 'difficulty_levels':
            columns.append(sa.Column('level_order', sa.Integer(), unique=True))
        op.create_table(table, *columns)

        op.create_table(
            junction,
            sa.Column('recipe_id', sa.Integer(), sa.ForeignKey('recipes.id', ondelete='CASCADE'), primary_key=True),
            sa.Column(column, sa.Integer(), sa.ForeignKey(f'{table}.id', ondelete='CASCADE'), primary_key=True),
        )

    op.create_table(
        'user_dietary_restrictions',
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id', ondelete='CASCADE'), primary_key=True),
        sa.Column(
            'dietary_restriction_id',
            sa.Integer(),
            sa.ForeignKey('dietary_restrictions.id', ondelete='CASCADE'),
            primary_key=True,
        ),
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table('user_dietary_restrictions')
    for table, junction, _ in reversed(TAXONOMIES):
        op.drop_table(junction)
        op.drop_table(table)
    op.drop_index('ix_recipe_ratings_recipe_id', table_name='recipe_ratings')
    op.drop_table('recipe_ratings')
    op.drop_table('user_favorites')
    op.drop_table('recipe_ingredients')
    op.drop_index('ix_ingredients_name', table_name='ingredients')
    op.drop_table('ingredients')
    op.drop_index('ix_recipes_created_at', table_name='recipes')
    op.drop_index('ix_recipes_title', table_name='recipes')
    op.drop_index('ix_recipes_user_id', table_name='recipes')
    op.drop_table('recipes')
    op.drop_table('users')
