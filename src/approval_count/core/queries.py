"""All GraphQL query strings as constants."""

TEAM_MEMBERS_PAGE_SIZE = 50
APPROVALS_PAGE_SIZE = 50

TEAM_MEMBERS = """
query($org: String!, $team: String!, $first: Int!) {
  organization(login: $org) {
    team(slug: $team) {
      members(first: $first) {
        totalCount
        edges {
          node { login }
        }
      }
    }
  }
}
"""

PULL_REQUESTS_WITH_APPROVALS = """
query($owner: String!, $name: String!, $approvals: Int!, $cursor: String) {
  repository(owner: $owner, name: $name) {
    pullRequests(
      first: 100
      after: $cursor
      states: [OPEN, CLOSED, MERGED]
      orderBy: {field: UPDATED_AT, direction: DESC}
    ) {
      edges {
        node {
          author { login }
          number
          title
          url
          createdAt
          updatedAt
          reviews(states: [APPROVED], first: $approvals) {
            totalCount
            edges {
              node {
                author { login }
                state
                submittedAt
              }
            }
          }
        }
      }
      pageInfo { hasNextPage endCursor }
    }
  }
}
"""
