"""Demonstration content loaded into a fresh store at startup."""
from datetime import datetime, timezone
from typing import List

from .models import Comment, Post

REACT_TS_ARTICLE = """# Introduction

In the rapidly evolving world of web development, React and TypeScript have emerged as the gold standard for building modern, scalable applications.

## Why React and TypeScript?

The combination of React's component-based architecture and TypeScript's static typing gives developers:

- Better IDE support
- Static type checking
- Safer refactoring
- Fewer runtime errors

## Modern React Patterns

### 1. Custom Hooks for State Logic

Custom hooks move component logic into reusable functions:

```javascript
function useToggle(initialValue = false) {
  const [value, setValue] = useState(initialValue);
  const toggle = useCallback(() => setValue(prev => !prev), []);
  return [value, toggle];
}
```

### 2. Compound Components

Components that share implicit state and work together as one flexible unit.

## Performance Optimization

- **Code Splitting:** load chunks on demand
- **Memoization:** `React.memo` and `useMemo` against needless re-renders
- **Lazy Loading:** load components only when needed
- **Bundle Analysis:** keep an eye on bundle size

## Conclusion

React and TypeScript keep evolving. With these patterns you are well equipped to build applications that stand the test of time."""

IMAGE_CODE = 'https://images.unsplash.com/photo-1461749280684-dccba630e2f6?ixlib=rb-4.0.3&auto=format&fit=crop'
IMAGE_DESIGN = 'https://images.unsplash.com/photo-1561070791-2526d30994b5?ixlib=rb-4.0.3&auto=format&fit=crop'


def _day(year, month, day, hour=0):
    return datetime(year, month, day, hour, tzinfo=timezone.utc)


def sample_posts() -> List[Post]:
    def post(id, title, excerpt, content, category, image, published, likes):
        return Post(
            id=id, title=title, excerpt=excerpt, content=content, category=category,
            status='published', featured_image=image, publish_date=published, likes=likes,
            created_at=published, updated_at=published,
        )

    return [
        post(1, 'Building Modern Web Applications with React and TypeScript',
             'Exploring the latest patterns and best practices for creating scalable, maintainable web applications in 2024.',
             REACT_TS_ARTICLE, 'JavaScript', IMAGE_CODE + '&w=800&h=400', _day(2024, 3, 15), 24),
        post(2, 'Advanced JavaScript Patterns for Modern Development',
             'Dive deep into advanced JavaScript patterns that will make your code more maintainable and performant.',
             '# Advanced JavaScript Patterns\n\nThis post explores advanced patterns...',
             'JavaScript', IMAGE_CODE + '&w=600&h=400', _day(2024, 3, 10), 12),
        post(3, 'Design Systems: Creating Consistency at Scale',
             'Learn how to build and maintain design systems that scale across teams and products.',
             '# Design Systems\n\nCreating consistent design systems...',
             'Design', IMAGE_DESIGN + '&w=600&h=400', _day(2024, 3, 8), 18),
    ]


def sample_comments() -> List[Comment]:
    return [
        Comment(id=1, post_id=1, author='John Doe', created_at=_day(2024, 3, 15, 10),
                content="Great article! The custom hooks example is exactly what I needed to clean up my components."),
        Comment(id=2, post_id=1, author='Sarah Miller', created_at=_day(2024, 3, 15, 8),
                content="Compound components finally make sense to me. When would you pick them over plain prop drilling?"),
        Comment(id=3, post_id=1, author='Mike Kim', created_at=_day(2024, 3, 15, 6),
                content="Just starting with TypeScript and React, this gives me a good roadmap. The performance section is gold."),
    ]


def seed_sample_data(store) -> None:
    store.load(posts=sample_posts(), comments=sample_comments())
