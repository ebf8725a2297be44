"""Project-level configuration templates (env, metadata routes, Next.js config)"""

from __future__ import annotations

from basinas.domain.config.site import SiteConfig


def render_env_file(project_name: str, site: SiteConfig) -> str:
    """Render the .env file for the generated project

    Args:
        project_name: Project name, used as the public application name
        site: Site metadata values

    Returns:
        .env file content
    """
    values = [
        ("NEXT_PUBLIC_APP_NAME", project_name, False),
        ("NEXT_PUBLIC_APP_DESCRIPTION", site.description, True),
        ("NEXT_PUBLIC_APP_AUTHOR", site.author, True),
        ("NEXT_PUBLIC_APP_VERSION", site.version, True),
        ("NEXT_PUBLIC_APP_URL", site.url, True),
        ("NEXT_PUBLIC_APP_EMAIL", site.email, True),
        ("NEXT_PUBLIC_APP_PHONE", site.phone, True),
        ("NEXT_PUBLIC_APP_ADDRESS", site.address, True),
        ("NEXT_PUBLIC_APP_GITHUB", site.github, True),
        ("NEXT_PUBLIC_APP_LINKEDIN", site.linkedin, True),
    ]
    lines = []
    for key, value, quoted in values:
        if quoted:
            value = '"' + value.replace('"', '\\"') + '"'
        lines.append(f"{key}={value}")
    return "\n".join(lines) + "\n"


SITEMAP = """import { MetadataRoute } from "next"

export default function sitemap(): MetadataRoute.Sitemap {
  const baseUrl = process.env.NEXT_PUBLIC_APP_URL || 'https://yourapp.com'

  return [
    {
      url: baseUrl,
      lastModified: new Date(),
      changeFrequency: 'yearly',
      priority: 1,
    },
    {
      url: `${baseUrl}/about`,
      lastModified: new Date(),
      changeFrequency: 'monthly',
      priority: 0.8,
    },
    {
      url: `${baseUrl}/contact`,
      lastModified: new Date(),
      changeFrequency: 'monthly',
      priority: 0.8,
    },
    {
      url: `${baseUrl}/privacy`,
      lastModified: new Date(),
      changeFrequency: 'yearly',
      priority: 0.5,
    },
    {
      url: `${baseUrl}/terms`,
      lastModified: new Date(),
      changeFrequency: 'yearly',
      priority: 0.5,
    },
  ]
}
"""

ROBOTS = """import { MetadataRoute } from "next"

export default function robots(): MetadataRoute.Robots {
  const baseUrl = process.env.NEXT_PUBLIC_APP_URL || 'https://yourapp.com'

  return {
    rules: {
      userAgent: '*',
      allow: '/',
      disallow: ['/api/', '/admin/'],
    },
    sitemap: `${baseUrl}/sitemap.xml`,
  }
}
"""

NEXT_CONFIG = """import type { NextConfig } from "next"
import { createMDX } from 'fumadocs-mdx/next'

const nextConfig: NextConfig = {
  // Performance optimizations
  compress: true, // Enable gzip compression
  poweredByHeader: false, // Remove X-Powered-By header

  // Turbopack is enabled by default in Next.js 16
  turbopack: {
    // Turbopack already optimizes bundles automatically
    // No additional config needed for most cases
  },

  experimental: {
    optimizePackageImports: ['lucide-react', '@radix-ui/react-*', 'next-themes'],
    // Faster server component rendering
    serverComponentsHmrCache: true,
  },

  logging: {
    fetches: {
      fullUrl: true,
    },
  },

  images: {
    formats: ['image/avif', 'image/webp'], // Use modern formats
    remotePatterns: [
      {
        protocol: 'https',
        hostname: '**.vercel.app',
      },
      {
        protocol: 'https',
        hostname: '**.githubusercontent.com',
      },
    ],
    dangerouslyAllowSVG: true,
    contentDispositionType: 'attachment',
    contentSecurityPolicy: "default-src 'self'; script-src 'none'; sandbox;",
  },
}

const withMDX = createMDX()

export default withMDX(nextConfig)
"""

INSTRUMENTATION = """export function onRouterTransitionStart(url: string) {
  if (typeof performance !== 'undefined') {
    performance.mark(`nav-start-${url}`)
  }
}

export function onRouterTransitionComplete(url: string) {
  if (typeof performance !== 'undefined') {
    performance.mark(`nav-complete-${url}`)

    // Measure navigation performance
    const startMark = performance.getEntriesByName(`nav-start-${url}`)[0]
    const completeMark = performance.getEntriesByName(`nav-complete-${url}`)[0]

    if (startMark && completeMark) {
      const duration = completeMark.startTime - startMark.startTime
      console.log(`Navigation to ${url} took ${duration.toFixed(2)}ms`)
    }
  }
}
"""

FONTS = """import { Inter } from "next/font/google"

// Optimize font loading - prevents layout shift
export const inter = Inter({
  subsets: ["latin"],
  display: "swap", // Use fallback font while loading
  preload: true,
  variable: "--font-inter",
  fallback: ["system-ui", "arial"],
})

// For headings - load only when needed
export const interTight = Inter({
  subsets: ["latin"],
  display: "swap",
  weight: ["600", "700", "800"],
  variable: "--font-inter-tight",
})
"""

PROXY = """import { NextResponse } from 'next/server'
import type { NextRequest } from 'next/server'

/**
 * Next.js 16 Proxy Middleware
 *
 * This proxy function runs on the Node.js runtime and can be used to:
 * - Redirect requests
 * - Rewrite URLs
 * - Add/remove headers
 * - Handle authentication
 * - Implement A/B testing
 * - Internationalization routing
 *
 * Note: This replaces the old 'middleware' convention in Next.js 16
 */

export function proxy(request: NextRequest) {
  // Example: Redirect /old-path to /new-path
  if (request.nextUrl.pathname === '/old-path') {
    return NextResponse.redirect(new URL('/new-path', request.url))
  }

  // Example: Add custom header to all requests
  const response = NextResponse.next()
  response.headers.set('x-custom-header', 'hello-world')

  return response
}

/**
 * Configuration for the proxy middleware
 *
 * The matcher defines which paths this proxy should run on.
 * You can use:
 * - Single paths: '/about'
 * - Multiple paths: ['/about', '/dashboard']
 * - Dynamic paths: '/blog/:slug'
 * - Wildcard paths: '/api/*'
 * - Exclude patterns: '/((?!api|_next/static|_next/image|favicon.ico).*)'
 */
export const config = {
  matcher: [
    /*
     * Match all request paths except for the ones starting with:
     * - api (API routes)
     * - _next/static (static files)
     * - _next/image (image optimization files)
     * - favicon.ico, sitemap.xml, robots.txt (metadata files)
     */
    '/((?!api|_next/static|_next/image|favicon.ico|sitemap.xml|robots.txt).*)',
  ],
}
"""
