"""
User Story Templates - Static bad / reference examples per category

The bad story seeds an editable draft; the reference story is shown as an
exemplar. Neither is scored as part of the rubric.
"""

from enum import Enum
from typing import List, NamedTuple, Union


class StoryCategory(str, Enum):
    GENERAL = 'General'
    UI = 'UI'
    FRONTEND = 'Frontend'
    API = 'API'
    BACKEND = 'Backend'


class CategoryTemplate(NamedTuple):
    bad: str
    reference: str


STORIES = {
    StoryCategory.GENERAL: CategoryTemplate(
        bad="""As a user I want the system to be better and easy etc so that things are improved.
It should do many things and be nice.
""",
        reference="""As a project member, I want to receive a daily digest email summarizing my assigned tasks so that I can plan my day efficiently.

Acceptance Criteria:
Given I have at least one open task,
When the daily digest is generated at 8am local time,
Then I receive an email listing my tasks grouped by due date and priority.
"""
    ),
    StoryCategory.UI: CategoryTemplate(
        bad="""As a user I want the screens to look nice and modern etc so that it's better.
It should be fast and beautiful and have animations and stuff.
""",
        reference="""As a shopper, I want the product detail page to display images in a responsive gallery so that I can clearly view products on any screen size.

Acceptance Criteria:
Given I open a product detail page on a mobile device,
When I swipe the image carousel,
Then the next image appears smoothly and the thumbnails update to reflect the current image.
"""
    ),
    StoryCategory.FRONTEND: CategoryTemplate(
        bad="""As a user I want the app to load quickly and just work with less bugs etc.
It should be reactive and nice and use the latest frameworks.
""",
        reference="""As a returning user, I want client-side caching for my dashboard data so that the page loads instantly on revisits within 5 minutes.

Acceptance Criteria:
Given I have already loaded my dashboard within the last 5 minutes,
When I navigate back to the dashboard,
Then the dashboard data is served from cache and refreshed in the background without blocking the UI.
"""
    ),
    StoryCategory.API: CategoryTemplate(
        bad="""As an admin I want an API that does everything quickly so data is synced and stuff.
It should be secure and powerful.
""",
        reference="""As an admin, I want an authenticated POST /v1/users/{id}/roles endpoint so that I can assign or revoke roles without database access.

Acceptance Criteria:
Given I have a valid admin token,
When I POST to /v1/users/123/roles with body { add: ['editor'], remove: ['viewer'] },
Then the response is 200 with the updated roles list and the change is recorded in audit logs.
"""
    ),
    StoryCategory.BACKEND: CategoryTemplate(
        bad="""As a system I want the backend to be scalable and super fast and microservices etc.
It should handle many things.
""",
        reference="""As a platform operator, I want order processing to be handled asynchronously via a queue so that peak traffic does not slow down checkout.

Acceptance Criteria:
Given an order is submitted,
When the order service enqueues a job for payment and inventory,
Then a worker processes the job within 30 seconds and order status transitions are persisted atomically.
"""
    ),
}

DEFAULT_CATEGORY = StoryCategory.FRONTEND

BAD_STORY = STORIES[DEFAULT_CATEGORY].bad
REFERENCE_STORY = STORIES[DEFAULT_CATEGORY].reference


def resolve_category(category: Union[StoryCategory, str]) -> StoryCategory:
    """Map an identifier to its StoryCategory"""
    try:
        return StoryCategory(category)
    except ValueError:
        available = ', '.join(list_categories())
        raise ValueError(f"Unknown category: '{category}'. Available: {available}") from None


def get_template(category: Union[StoryCategory, str]) -> CategoryTemplate:
    """Get the bad/reference pair for a category"""
    return STORIES[resolve_category(category)]


def list_categories() -> List[str]:
    """List category identifiers in declaration order"""
    return [category.value for category in StoryCategory]
