"""Sample portfolio content loaded at startup."""

import logging

from portfolio.schemas import ProjectCreate, SkillCreate
from portfolio.storage.base import Storage

logger = logging.getLogger(__name__)

SAMPLE_PROJECTS = [
    {
        "title": "Real-time Data Dashboard",
        "description": (
            "Built an end-to-end solution for monitoring IoT sensor data "
            "with real-time analytics and alerts."
        ),
        "image_url": "https://images.unsplash.com/photo-1551288049-bebda4e38f71?auto=format&fit=crop&w=600&q=80",
        "categories": ["data-engineering", "visualization"],
        "technologies": ["Apache Kafka", "Spark Streaming", "Tableau", "AWS"],
        "github_url": "https://github.com",
        "live_url": "https://example.com",
        "featured": True,
        "order": 1,
    },
    {
        "title": "Cloud Data Warehouse",
        "description": (
            "Designed and implemented a scalable data warehouse solution on AWS "
            "to consolidate data from multiple sources."
        ),
        "image_url": "https://images.unsplash.com/photo-1558494949-ef010cbdcc31?auto=format&fit=crop&w=600&q=80",
        "categories": ["data-engineering", "cloud"],
        "technologies": ["AWS Redshift", "S3", "Airflow", "Python"],
        "github_url": "https://github.com",
        "live_url": "https://example.com",
        "featured": True,
        "order": 2,
    },
    {
        "title": "Predictive Analytics Dashboard",
        "description": (
            "Created an interactive dashboard with machine learning models "
            "to predict customer behavior and business trends."
        ),
        "image_url": "https://images.unsplash.com/photo-1551288049-bebda4e38f71?auto=format&fit=crop&w=600&q=80",
        "categories": ["visualization", "machine-learning"],
        "technologies": ["Scikit-learn", "D3.js", "React", "Flask"],
        "github_url": "https://github.com",
        "live_url": "https://example.com",
        "featured": True,
        "order": 3,
    },
    {
        "title": "ETL Pipeline Automation",
        "description": (
            "Developed a robust ETL system that automates data extraction, "
            "transformation, and loading processes."
        ),
        "image_url": "https://miro.medium.com/v2/resize:fit:1400/0*1YAwjo9ByzbuJS-9",
        "categories": ["data-engineering"],
        "technologies": ["Airflow", "Python", "Docker", "PostgreSQL"],
        "github_url": "https://github.com",
        "live_url": "https://example.com",
        "featured": True,
        "order": 4,
    },
    {
        "title": "Interactive Financial Dashboard",
        "description": (
            "Designed a comprehensive financial dashboard with interactive "
            "charts and drill-down capabilities."
        ),
        "image_url": "https://images.unsplash.com/photo-1460925895917-afdab827c52f?auto=format&fit=crop&w=600&q=80",
        "categories": ["visualization"],
        "technologies": ["Tableau", "SQL", "Power BI"],
        "github_url": "https://github.com",
        "live_url": "https://example.com",
        "featured": True,
        "order": 5,
    },
    {
        "title": "ML Model Deployment",
        "description": (
            "Built and deployed machine learning models in a cloud environment "
            "with automated retraining capabilities."
        ),
        "image_url": "https://images.unsplash.com/photo-1599658880436-c61792e70672?auto=format&fit=crop&w=600&q=80",
        "categories": ["machine-learning", "cloud"],
        "technologies": ["TensorFlow", "GCP", "Kubernetes", "MLflow"],
        "github_url": "https://github.com",
        "live_url": "https://example.com",
        "featured": True,
        "order": 6,
    },
]

SAMPLE_SKILLS = [
    # Data engineering
    {"name": "Python", "percentage": 95, "category": "data-engineering", "order": 1},
    {"name": "SQL", "percentage": 90, "category": "data-engineering", "order": 2},
    {"name": "Apache Spark", "percentage": 85, "category": "data-engineering", "order": 3},
    {"name": "Airflow", "percentage": 80, "category": "data-engineering", "order": 4},
    {"name": "Kafka", "percentage": 75, "category": "data-engineering", "order": 5},
    # Data visualization
    {"name": "Tableau", "percentage": 90, "category": "visualization", "order": 1},
    {"name": "Power BI", "percentage": 85, "category": "visualization", "order": 2},
    {"name": "D3.js", "percentage": 80, "category": "visualization", "order": 3},
    {"name": "Plotly", "percentage": 85, "category": "visualization", "order": 4},
    {"name": "Matplotlib/Seaborn", "percentage": 90, "category": "visualization", "order": 5},
]


def seed_sample_data(storage: Storage) -> None:
    """Load the sample projects and skills into an empty storage.

    Does nothing if the storage already holds projects or skills, so a
    database backend is seeded only once.
    """
    if storage.get_all_projects() or storage.get_all_skills():
        logger.info("Storage already has content, skipping sample data")
        return

    for project in SAMPLE_PROJECTS:
        storage.create_project(ProjectCreate.model_validate(project))
    for skill in SAMPLE_SKILLS:
        storage.create_skill(SkillCreate.model_validate(skill))

    logger.info(f"Seeded {len(SAMPLE_PROJECTS)} projects and {len(SAMPLE_SKILLS)} skills")
