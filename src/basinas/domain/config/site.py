"""Site metadata configuration model."""

from pydantic import BaseModel


class SiteConfig(BaseModel):
    """Values written to the generated project's .env file.

    The application name is always the project name and is not configurable here.
    """

    description: str = "A Next.js 16 app with shadcn/ui pre-configured"
    author: str = "Your Name"
    version: str = "1.0.0"
    url: str = "http://localhost:3000"
    email: str = "your.email@example.com"
    phone: str = "123-456-7890"
    address: str = "123 Main St, Anytown, USA"
    github: str = "your_github_handle"
    linkedin: str = "your_linkedin_handle"
