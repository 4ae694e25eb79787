"""GraphQL documents for the GitHub API.

Selections only name fields that exist on the remote schema. Lifecycle
status is never selected; it is derived from ``locked``/``closed``.
"""

ACTOR_FIELDS = """
    __typename
    login
    url
    avatarUrl
    ... on User { id }
    ... on Organization { id }
    ... on Bot { id }
    ... on Mannequin { id }
"""

CATEGORY_FIELDS = """
    id
    name
    slug
    description
    emoji
    emojiHTML
    isAnswerable
    createdAt
    updatedAt
"""

COMMENT_FIELDS = f"""
    id
    body
    bodyHTML
    url
    createdAt
    updatedAt
    upvoteCount
    viewerHasUpvoted
    isAnswer
    isMinimized
    minimizedReason
    replyTo {{ id }}
    author {{ {ACTOR_FIELDS} }}
"""

DISCUSSION_FIELDS = f"""
    id
    number
    title
    body
    url
    locked
    createdAt
    updatedAt
    upvoteCount
    viewerHasUpvoted
    answerChosenAt
    comments {{ totalCount }}
    category {{ {CATEGORY_FIELDS} }}
    author {{ {ACTOR_FIELDS} }}
    labels(first: 10) {{
        nodes {{ id name color description url }}
    }}
    answer {{ {COMMENT_FIELDS} }}
"""

PAGE_INFO = "pageInfo { hasNextPage endCursor }"

# Discussions

REPOSITORY_ID_QUERY = """
query RepositoryId($owner: String!, $name: String!) {
    repository(owner: $owner, name: $name) { id }
}
"""

DISCUSSIONS_QUERY = f"""
query Discussions(
    $owner: String!, $name: String!, $first: Int!, $after: String,
    $categoryId: ID, $orderBy: DiscussionOrder
) {{
    repository(owner: $owner, name: $name) {{
        discussions(first: $first, after: $after, categoryId: $categoryId, orderBy: $orderBy) {{
            totalCount
            {PAGE_INFO}
            nodes {{ {DISCUSSION_FIELDS} }}
        }}
    }}
}}
"""

DISCUSSION_BY_ID_QUERY = f"""
query Discussion($id: ID!) {{
    node(id: $id) {{
        ... on Discussion {{ {DISCUSSION_FIELDS} }}
    }}
}}
"""

DISCUSSION_BY_NUMBER_QUERY = f"""
query DiscussionByNumber($owner: String!, $name: String!, $number: Int!) {{
    repository(owner: $owner, name: $name) {{
        discussion(number: $number) {{ {DISCUSSION_FIELDS} }}
    }}
}}
"""

CREATE_DISCUSSION_MUTATION = f"""
mutation CreateDiscussion($input: CreateDiscussionInput!) {{
    createDiscussion(input: $input) {{
        discussion {{ {DISCUSSION_FIELDS} }}
    }}
}}
"""

UPDATE_DISCUSSION_MUTATION = f"""
mutation UpdateDiscussion($input: UpdateDiscussionInput!) {{
    updateDiscussion(input: $input) {{
        discussion {{ {DISCUSSION_FIELDS} }}
    }}
}}
"""

DELETE_DISCUSSION_MUTATION = """
mutation DeleteDiscussion($input: DeleteDiscussionInput!) {
    deleteDiscussion(input: $input) {
        discussion { id }
    }
}
"""

LOCK_MUTATION = f"""
mutation LockLockable($input: LockLockableInput!) {{
    lockLockable(input: $input) {{
        lockedRecord {{
            ... on Discussion {{ {DISCUSSION_FIELDS} }}
        }}
    }}
}}
"""

UNLOCK_MUTATION = f"""
mutation UnlockLockable($input: UnlockLockableInput!) {{
    unlockLockable(input: $input) {{
        unlockedRecord {{
            ... on Discussion {{ {DISCUSSION_FIELDS} }}
        }}
    }}
}}
"""

ADD_UPVOTE_MUTATION = f"""
mutation AddUpvote($input: AddUpvoteInput!) {{
    addUpvote(input: $input) {{
        subject {{
            ... on Discussion {{ {DISCUSSION_FIELDS} }}
            ... on DiscussionComment {{ {COMMENT_FIELDS} }}
        }}
    }}
}}
"""

REMOVE_UPVOTE_MUTATION = f"""
mutation RemoveUpvote($input: RemoveUpvoteInput!) {{
    removeUpvote(input: $input) {{
        subject {{
            ... on Discussion {{ {DISCUSSION_FIELDS} }}
            ... on DiscussionComment {{ {COMMENT_FIELDS} }}
        }}
    }}
}}
"""

# Comments

DISCUSSION_COMMENTS_QUERY = f"""
query DiscussionComments($id: ID!, $first: Int!, $after: String, $replyFirst: Int!) {{
    node(id: $id) {{
        ... on Discussion {{
            comments(first: $first, after: $after) {{
                totalCount
                {PAGE_INFO}
                nodes {{
                    {COMMENT_FIELDS}
                    replies(first: $replyFirst) {{
                        totalCount
                        nodes {{ {COMMENT_FIELDS} }}
                    }}
                }}
            }}
        }}
    }}
}}
"""

ADD_COMMENT_MUTATION = f"""
mutation AddDiscussionComment($input: AddDiscussionCommentInput!) {{
    addDiscussionComment(input: $input) {{
        comment {{ {COMMENT_FIELDS} }}
    }}
}}
"""

UPDATE_COMMENT_MUTATION = f"""
mutation UpdateDiscussionComment($input: UpdateDiscussionCommentInput!) {{
    updateDiscussionComment(input: $input) {{
        comment {{ {COMMENT_FIELDS} }}
    }}
}}
"""

DELETE_COMMENT_MUTATION = """
mutation DeleteDiscussionComment($input: DeleteDiscussionCommentInput!) {
    deleteDiscussionComment(input: $input) {
        comment { id }
    }
}
"""

MARK_ANSWER_MUTATION = f"""
mutation MarkDiscussionCommentAsAnswer($input: MarkDiscussionCommentAsAnswerInput!) {{
    markDiscussionCommentAsAnswer(input: $input) {{
        discussion {{ {DISCUSSION_FIELDS} }}
    }}
}}
"""

UNMARK_ANSWER_MUTATION = f"""
mutation UnmarkDiscussionCommentAsAnswer($input: UnmarkDiscussionCommentAsAnswerInput!) {{
    unmarkDiscussionCommentAsAnswer(input: $input) {{
        discussion {{ {DISCUSSION_FIELDS} }}
    }}
}}
"""

# Categories

CATEGORIES_QUERY = f"""
query DiscussionCategories($owner: String!, $name: String!, $first: Int!, $after: String) {{
    repository(owner: $owner, name: $name) {{
        discussionCategories(first: $first, after: $after) {{
            totalCount
            {PAGE_INFO}
            nodes {{ {CATEGORY_FIELDS} }}
        }}
    }}
}}
"""

CATEGORY_BY_ID_QUERY = f"""
query DiscussionCategory($id: ID!) {{
    node(id: $id) {{
        ... on DiscussionCategory {{ {CATEGORY_FIELDS} }}
    }}
}}
"""

# Projects

PROJECT_OWNER_FIELDS = """
    __typename
    ... on User { id login }
    ... on Organization { id login }
"""

PROJECT_FIELDS = f"""
    id
    number
    title
    url
    closed
    shortDescription
    readme
    public
    createdAt
    updatedAt
    owner {{ {PROJECT_OWNER_FIELDS} }}
"""

PROJECT_ITEM_FIELDS = """
    id
    isArchived
    createdAt
    updatedAt
    project { id }
    content {
        __typename
        ... on Issue { id title body state url }
        ... on PullRequest { id title body state url }
        ... on DraftIssue { id title body }
    }
"""

PROJECT_FIELD_FIELDS = """
    ... on ProjectV2Field { id name dataType }
    ... on ProjectV2IterationField { id name dataType }
    ... on ProjectV2SingleSelectField {
        id
        name
        dataType
        options { id name color }
    }
"""

VIEW_FIELDS = """
    id
    number
    name
    layout
    filter
    createdAt
    updatedAt
    project { id }
"""

VIEWER_QUERY = """
query Viewer {
    viewer {
        id
        login
        projectsV2(first: 1) { totalCount }
    }
}
"""

OWNER_QUERY = """
query Owner($login: String!) {
    repositoryOwner(login: $login) {
        __typename
        id
        login
    }
}
"""

VIEWER_PROJECTS_QUERY = f"""
query ViewerProjects($first: Int!, $after: String) {{
    viewer {{
        projectsV2(first: $first, after: $after) {{
            totalCount
            {PAGE_INFO}
            nodes {{ {PROJECT_FIELDS} }}
        }}
    }}
}}
"""

ORGANIZATION_PROJECTS_QUERY = f"""
query OrganizationProjects($login: String!, $first: Int!, $after: String) {{
    owner: organization(login: $login) {{
        projectsV2(first: $first, after: $after) {{
            totalCount
            {PAGE_INFO}
            nodes {{ {PROJECT_FIELDS} }}
        }}
    }}
}}
"""

USER_PROJECTS_QUERY = f"""
query UserProjects($login: String!, $first: Int!, $after: String) {{
    owner: user(login: $login) {{
        projectsV2(first: $first, after: $after) {{
            totalCount
            {PAGE_INFO}
            nodes {{ {PROJECT_FIELDS} }}
        }}
    }}
}}
"""

PROJECT_BY_ID_QUERY = f"""
query Project($id: ID!) {{
    node(id: $id) {{
        ... on ProjectV2 {{ {PROJECT_FIELDS} }}
    }}
}}
"""

ORGANIZATION_PROJECT_BY_NUMBER_QUERY = f"""
query OrganizationProject($login: String!, $number: Int!) {{
    owner: organization(login: $login) {{
        projectV2(number: $number) {{ {PROJECT_FIELDS} }}
    }}
}}
"""

USER_PROJECT_BY_NUMBER_QUERY = f"""
query UserProject($login: String!, $number: Int!) {{
    owner: user(login: $login) {{
        projectV2(number: $number) {{ {PROJECT_FIELDS} }}
    }}
}}
"""

CREATE_PROJECT_MUTATION = f"""
mutation CreateProject($input: CreateProjectV2Input!) {{
    createProjectV2(input: $input) {{
        projectV2 {{ {PROJECT_FIELDS} }}
    }}
}}
"""

UPDATE_PROJECT_MUTATION = f"""
mutation UpdateProject($input: UpdateProjectV2Input!) {{
    updateProjectV2(input: $input) {{
        projectV2 {{ {PROJECT_FIELDS} }}
    }}
}}
"""

DELETE_PROJECT_MUTATION = """
mutation DeleteProject($input: DeleteProjectV2Input!) {
    deleteProjectV2(input: $input) {
        projectV2 { id }
    }
}
"""

PROJECT_ITEMS_QUERY = f"""
query ProjectItems($id: ID!, $first: Int!, $after: String) {{
    node(id: $id) {{
        ... on ProjectV2 {{
            items(first: $first, after: $after) {{
                totalCount
                {PAGE_INFO}
                nodes {{ {PROJECT_ITEM_FIELDS} }}
            }}
        }}
    }}
}}
"""

ADD_PROJECT_ITEM_MUTATION = f"""
mutation AddProjectItem($input: AddProjectV2ItemByIdInput!) {{
    addProjectV2ItemById(input: $input) {{
        item {{ {PROJECT_ITEM_FIELDS} }}
    }}
}}
"""

DELETE_PROJECT_ITEM_MUTATION = """
mutation DeleteProjectItem($input: DeleteProjectV2ItemInput!) {
    deleteProjectV2Item(input: $input) {
        deletedItemId
    }
}
"""

UPDATE_ITEM_FIELD_VALUE_MUTATION = f"""
mutation UpdateProjectItemFieldValue($input: UpdateProjectV2ItemFieldValueInput!) {{
    updateProjectV2ItemFieldValue(input: $input) {{
        projectV2Item {{ {PROJECT_ITEM_FIELDS} }}
    }}
}}
"""

# Views

PROJECT_VIEWS_QUERY = f"""
query ProjectViews($id: ID!, $first: Int!, $after: String) {{
    node(id: $id) {{
        ... on ProjectV2 {{
            views(first: $first, after: $after) {{
                totalCount
                {PAGE_INFO}
                nodes {{ {VIEW_FIELDS} }}
            }}
        }}
    }}
}}
"""

VIEW_BY_ID_QUERY = f"""
query ProjectView($id: ID!) {{
    node(id: $id) {{
        ... on ProjectV2View {{ {VIEW_FIELDS} }}
    }}
}}
"""

# Fields

PROJECT_FIELDS_QUERY = f"""
query ProjectFields($id: ID!, $first: Int!, $after: String) {{
    node(id: $id) {{
        ... on ProjectV2 {{
            fields(first: $first, after: $after) {{
                totalCount
                {PAGE_INFO}
                nodes {{ {PROJECT_FIELD_FIELDS} }}
            }}
        }}
    }}
}}
"""

VIEW_FIELDS_QUERY = f"""
query ProjectViewFields($id: ID!) {{
    node(id: $id) {{
        ... on ProjectV2View {{
            id
            fields(first: 100) {{
                nodes {{ {PROJECT_FIELD_FIELDS} }}
            }}
            project {{
                id
                fields(first: 100) {{
                    nodes {{ {PROJECT_FIELD_FIELDS} }}
                }}
            }}
        }}
    }}
}}
"""
