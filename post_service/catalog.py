"""
Built-in blog content.

Holds the launch set of blog posts and the tag filter catalog shown on the
blog page. Callers get fresh immutable tuples from the builder functions and
pass them into the services that need them.
"""

from typing import Any, Dict, List, Tuple

from .models import Post, TagFilter

AVATAR_PLACEHOLDER = "/images/img_picture_placeholder_32x32.png"

# Tag value that disables tag filtering.
ALL_TAGS_LABEL = "All"

_POST_RECORDS: List[Dict[str, Any]] = [
    {
        "id": "1",
        "title": "Understanding GST Compliance: A Complete Guide for Businesses",
        "description": "Learn the essential aspects of GST compliance and how to streamline your business processes for better efficiency and accuracy.",
        "author": {"name": "Suvit Team", "avatar": AVATAR_PLACEHOLDER},
        "date": "2024-01-15",
        "tags": ["GST", "Compliance", "Business"],
        "image": "/images/img_image.png",
        "featured": True,
    },
    {
        "id": "2",
        "title": "Automating Invoice Processing: Best Practices for 2024",
        "description": "Discover the latest trends in invoice automation and how AI-powered solutions can revolutionize your accounting workflow.",
        "author": {"name": "Priya Sharma", "avatar": AVATAR_PLACEHOLDER},
        "date": "2024-01-10",
        "tags": ["Automation", "Invoicing", "AI"],
        "image": "/images/img_image_2.png",
        "featured": False,
    },
    {
        "id": "3",
        "title": "Expense Tracking Made Simple: Tools and Techniques",
        "description": "Explore modern expense tracking solutions that help businesses maintain better financial control and transparency.",
        "author": {"name": "Rahul Kumar", "avatar": AVATAR_PLACEHOLDER},
        "date": "2024-01-08",
        "tags": ["Expense Tracking", "Finance", "Tools"],
        "image": "/images/img_image_placeholder.png",
        "featured": False,
    },
    {
        "id": "4",
        "title": "Digital Transformation in Accounting: What CAs Need to Know",
        "description": "Stay ahead of the curve with insights into digital transformation trends affecting the accounting profession.",
        "author": {"name": "Dr. Meera Patel", "avatar": AVATAR_PLACEHOLDER},
        "date": "2024-01-05",
        "tags": ["Digital Transformation", "CA", "Technology"],
        "image": "/images/img_image.png",
        "featured": False,
    },
    {
        "id": "5",
        "title": "Cloud-Based Accounting Solutions: Benefits and Implementation",
        "description": "Learn about the advantages of cloud-based accounting and how to successfully implement these solutions in your practice.",
        "author": {"name": "Suvit Team", "avatar": AVATAR_PLACEHOLDER},
        "date": "2024-01-03",
        "tags": ["Cloud", "Accounting", "Implementation"],
        "image": "/images/img_image_2.png",
        "featured": False,
    },
    {
        "id": "6",
        "title": "Tax Planning Strategies for Small Businesses",
        "description": "Discover effective tax planning strategies that can help small businesses optimize their tax liabilities and improve cash flow.",
        "author": {"name": "Amit Singh", "avatar": AVATAR_PLACEHOLDER},
        "date": "2024-01-01",
        "tags": ["Tax Planning", "Small Business", "Strategy"],
        "image": "/images/img_image_placeholder.png",
        "featured": False,
    },
    {
        "id": "7",
        "title": "8 Top Open-Source LLMs for 2024 and Their Uses",
        "description": "Join us for a full day of events sharing best practices from industry leaders and technology experts.",
        "author": {"name": "Rohit Kadam", "avatar": AVATAR_PLACEHOLDER},
        "date": "2024-01-15",
        "tags": ["AI", "Technology", "LLM"],
        "image": "/images/img_image.png",
        "featured": False,
    },
    {
        "id": "8",
        "title": "Digital Transformation in Accounting Practices",
        "description": "Explore how digital transformation is reshaping the accounting industry and what it means for your practice.",
        "author": {"name": "Priya Sharma", "avatar": AVATAR_PLACEHOLDER},
        "date": "2024-01-12",
        "tags": ["Digital Transformation", "Technology", "Innovation"],
        "image": "/images/img_image_2.png",
        "featured": False,
    },
    {
        "id": "9",
        "title": "Automated Compliance Reporting: A Complete Guide",
        "description": "Learn how to implement automated compliance reporting systems to streamline your regulatory requirements.",
        "author": {"name": "Rajesh Kumar", "avatar": AVATAR_PLACEHOLDER},
        "date": "2024-01-10",
        "tags": ["Compliance", "Automation", "Reporting"],
        "image": "/images/img_image_placeholder.png",
        "featured": False,
    },
    {
        "id": "10",
        "title": "Financial Planning Strategies for Small Businesses",
        "description": "Essential financial planning strategies that can help small businesses grow and succeed in competitive markets.",
        "author": {"name": "Neha Sharma", "avatar": AVATAR_PLACEHOLDER},
        "date": "2024-01-08",
        "tags": ["Financial Planning", "Small Business", "Strategy"],
        "image": "/images/img_image_placeholder.png",
        "featured": False,
    },
    {
        "id": "11",
        "title": "Digital Banking Solutions for Modern Businesses",
        "description": "Explore the latest digital banking solutions and how they can streamline your business financial operations.",
        "author": {"name": "Vikram Singh", "avatar": AVATAR_PLACEHOLDER},
        "date": "2024-01-06",
        "tags": ["Digital Banking", "Technology", "Finance"],
        "image": "/images/img_image_placeholder.png",
        "featured": False,
    },
    {
        "id": "12",
        "title": "Tax Optimization Techniques for Entrepreneurs",
        "description": "Advanced tax optimization techniques that entrepreneurs can use to maximize their business efficiency.",
        "author": {"name": "Anjali Patel", "avatar": AVATAR_PLACEHOLDER},
        "date": "2024-01-04",
        "tags": ["Tax Optimization", "Entrepreneurs", "Strategy"],
        "image": "/images/img_image_placeholder.png",
        "featured": False,
    },
]

_TAG_FILTER_RECORDS: List[Dict[str, str]] = [
    {"id": "all", "label": ALL_TAGS_LABEL},
    {"id": "gst", "label": "GST"},
    {"id": "automation", "label": "Automation"},
    {"id": "compliance", "label": "Compliance"},
    {"id": "technology", "label": "Technology"},
]


def build_default_posts() -> Tuple[Post, ...]:
    """Build the launch set of blog posts in publication order."""
    return tuple(Post.model_validate(record) for record in _POST_RECORDS)


def build_default_tag_filters() -> Tuple[TagFilter, ...]:
    """Build the tag filter catalog shown above the post grid."""
    return tuple(TagFilter.model_validate(record) for record in _TAG_FILTER_RECORDS)
