# -*- coding: utf-8 -*-
"""Sample article catalog inserted into every new store."""

from __future__ import annotations

from typing import List

from .models import ArticleCreate


SAMPLE_ARTICLES: List[ArticleCreate] = [
    ArticleCreate(
        title="10 Superfoods to Boost Your Immune System",
        content="Long detailed content about superfoods and their benefits...",
        summary="Discover foods that can help strengthen your body's natural defenses.",
        image_url="https://images.unsplash.com/photo-1498837167922-ddd27525d352",
        category="Nutrition",
        read_time=5,
    ),
    ArticleCreate(
        title="The Benefits of Strength Training for Women",
        content="Detailed content about benefits of strength training for women...",
        summary="Why building muscle is crucial for women's health and fitness goals.",
        image_url="https://images.unsplash.com/photo-1517836357463-d25dfeac3438",
        category="Exercise",
        read_time=7,
    ),
    ArticleCreate(
        title="5 Easy Meal Prep Ideas for Busy Professionals",
        content="Content about meal preparation strategies...",
        summary="Time-saving meal prep strategies that don't sacrifice nutrition.",
        image_url="https://images.unsplash.com/photo-1512621776951-a57141f2eefd",
        category="Meal Prep",
        read_time=4,
    ),
    ArticleCreate(
        title="How to Create a Sustainable Fitness Routine",
        content="Content about creating sustainable fitness habits...",
        summary="Tips for building exercise habits that last a lifetime.",
        image_url="https://images.unsplash.com/photo-1571019613454-1cb2f99b2d8b",
        category="Fitness",
        read_time=6,
    ),
    ArticleCreate(
        title="Understanding Macronutrients: A Guide for Beginners",
        content="Detailed guide about protein, carbs and fats...",
        summary="Learn the basics of proteins, carbs, and fats for better nutrition.",
        image_url="https://images.unsplash.com/photo-1505253758473-96b7015fcd40",
        category="Nutrition",
        read_time=8,
    ),
]
