"""Page templates for the main site section"""

BACK_HOME_LINK = """      <div className="text-left mt-12">
        <Link href="/" className="text-neutral-600 dark:text-neutral-400 hover:text-black dark:hover:text-white transition-colors text-lg">
          ← Back to Home
        </Link>
      </div>
"""


def _text_page(component: str, title: str, paragraphs: list) -> str:
    """Render a static page made of a heading and plain paragraphs."""
    body = "".join(
        '      <p className="text-lg text-left mb-2 text-black dark:text-white">\n'
        f"        {paragraph}\n"
        "      </p>\n"
        for paragraph in paragraphs
    )
    return (
        'import Link from "next/link"\n'
        "\n"
        f"export default function {component}() {{\n"
        "  return (\n"
        '    <div className="container mx-auto px-4 py-16 max-w-2xl">\n'
        f'      <h1 className="text-4xl font-bold text-left mb-6 text-black dark:text-white">{title}</h1>\n'
        f"{body}"
        f"{BACK_HOME_LINK}"
        "    </div>\n"
        "  )\n"
        "}\n"
    )


ABOUT_PAGE = _text_page(
    "About",
    "About Us",
    [
        "Lorem ipsum dolor sit amet, consectetur adipiscing elit. Sed do eiusmod tempor "
        "incididunt ut labore et dolore magna aliqua.",
        "Ut enim ad minim veniam, quis nostrud exercitation ullamco laboris nisi ut aliquip "
        "ex ea commodo consequat.",
        "Duis aute irure dolor in reprehenderit in voluptate velit esse cillum dolore eu "
        "fugiat nulla pariatur.",
        "Excepteur sint occaecat cupidatat non proident, sunt in culpa qui officia deserunt "
        "mollit anim id est laborum.",
    ],
)

PRIVACY_PAGE = _text_page(
    "Privacy",
    "Privacy Policy",
    [
        "This Privacy Policy describes how your personal information is collected, used, and "
        "shared when you visit or make a purchase from our website.",
        "We do not collect any personal information from you unless you voluntarily submit it to us.",
        "We use your email address to send you updates about our products and services, and to "
        "respond to your inquiries.",
        "We do not share your personal information with third parties.",
        "We take reasonable measures to protect your personal information from unauthorized "
        "access, disclosure, alteration, or destruction.",
        "We may update this Privacy Policy from time to time. We will notify you of any changes "
        "by posting the new Privacy Policy on this page.",
        "If you have any questions about this Privacy Policy, please contact us.",
    ],
)

TERMS_PAGE = _text_page(
    "Terms",
    "Terms of Service",
    [
        "These Terms of Service govern your access to and use of our website, including our "
        "products and services.",
        "By accessing or using our website, you agree to be bound by these Terms. If you "
        "disagree with any part of the Terms, you may not access the website.",
        "We reserve the right, at our sole discretion, to modify or replace these Terms at any "
        "time. If a revision is material we will provide at least 30 days&apos; notice prior to "
        "any new terms taking effect. What constitutes a material change will be determined at "
        "our sole discretion.",
        "By continuing to access or use our website after any revisions become effective, you "
        "agree to be bound by the revised Terms. If you do not agree to the new terms, you are "
        "no longer authorized to use the website.",
        "We may, in our sole discretion, post new terms on the website. Your continued use of "
        "the website after such terms are posted will be subject to the new terms.",
        "If you have any questions about these Terms, please contact us.",
    ],
)

CONTACT_PAGE = """"use client"

import * as React from "react"
import Link from "next/link"
import { Button } from "@/components/ui/button"
import { Input } from "@/components/ui/input"
import { Textarea } from "@/components/ui/textarea"
import { Label } from "@/components/ui/label"

export default function Contact() {
  const [formData, setFormData] = React.useState({
    name: "",
    email: "",
    message: ""
  })

  const handleChange = (e: React.ChangeEvent<HTMLInputElement | HTMLTextAreaElement>) => {
    const { name, value } = e.target
    setFormData(prev => ({
      ...prev,
      [name]: value
    }))
  }

  const handleSubmit = (e: React.FormEvent) => {
    e.preventDefault()
    // Handle form submission here
    console.log('Form submitted:', formData)
    alert('Thank you for your message! We will get back to you soon.')
    setFormData({ name: "", email: "", message: "" })
  }

  return (
    <div className="container mx-auto px-4 py-16 max-w-2xl">
      <h1 className="text-4xl font-bold text-left mb-6 text-black dark:text-white">Contact Us</h1>
      <p className="text-lg text-left mb-12 text-neutral-600 dark:text-neutral-400">
        Have questions or feedback? We would love to hear from you.
      </p>

      <form onSubmit={handleSubmit} className="space-y-6">
        <div className="space-y-3">
          <Label htmlFor="name" className="text-lg text-black dark:text-white">Name</Label>
          <Input
            id="name"
            name="name"
            value={formData.name}
            onChange={handleChange}
            placeholder="Your name"
            className="text-lg bg-white dark:bg-black border-neutral-200 dark:border-neutral-700 text-black dark:text-white placeholder-neutral-400 dark:placeholder-neutral-500"
            required
          />
        </div>

        <div className="space-y-3">
          <Label htmlFor="email" className="text-lg text-black dark:text-white">Email</Label>
          <Input
            id="email"
            name="email"
            type="email"
            value={formData.email}
            onChange={handleChange}
            placeholder="your.email@example.com"
            className="text-lg bg-white dark:bg-black border-neutral-200 dark:border-neutral-700 text-black dark:text-white placeholder-neutral-400 dark:placeholder-neutral-500"
            required
          />
        </div>

        <div className="space-y-3">
          <Label htmlFor="message" className="text-lg text-black dark:text-white">Message</Label>
          <Textarea
            id="message"
            name="message"
            value={formData.message}
            onChange={handleChange}
            placeholder="Your message..."
            rows={6}
            className="text-lg bg-white dark:bg-black border-neutral-200 dark:border-neutral-700 text-black dark:text-white placeholder-neutral-400 dark:placeholder-neutral-500"
            required
          />
        </div>

        <Button type="submit" className="w-full text-lg">
          Send Message
        </Button>
      </form>

""" + BACK_HOME_LINK + """    </div>
  )
}
"""


def _quick_start_item(number: int, title: str, text: str) -> str:
    return (
        '          <li className="flex items-start gap-3">\n'
        '            <span className="flex-shrink-0 w-8 h-8 bg-black dark:bg-white text-white '
        'dark:text-black rounded-full flex items-center justify-center font-bold">\n'
        f"              {number}\n"
        "            </span>\n"
        "            <div>\n"
        f'              <h3 className="font-semibold text-black dark:text-white">{title}</h3>\n'
        '              <p className="text-neutral-600 dark:text-neutral-400">\n'
        f"                {text}\n"
        "              </p>\n"
        "            </div>\n"
        "          </li>\n"
    )


def _feature_card(icon: str, color: str, title: str, description: str, text: str) -> str:
    return (
        "        <Card>\n"
        "          <CardHeader>\n"
        f'            <{icon} className="h-10 w-10 mb-2 text-{color}-500" />\n'
        f"            <CardTitle>{title}</CardTitle>\n"
        "            <CardDescription>\n"
        f"              {description}\n"
        "            </CardDescription>\n"
        "          </CardHeader>\n"
        "          <CardContent>\n"
        '            <p className="text-sm text-neutral-600 dark:text-neutral-400">\n'
        f"              {text}\n"
        "            </p>\n"
        "          </CardContent>\n"
        "        </Card>\n"
    )


GET_STARTED_PAGE = (
    """import Link from "next/link"
import { Button } from "@/components/ui/button"
import { Card, CardContent, CardDescription, CardHeader, CardTitle } from "@/components/ui/card"
import { ArrowRight, Zap, Code, Palette } from "lucide-react"

export default function GetStarted() {
  return (
    <div className="container mx-auto px-4 py-16 max-w-4xl">
      <div className="text-center mb-12">
        <h1 className="text-5xl font-bold mb-4 text-black dark:text-white">
          Get Started
        </h1>
        <p className="text-xl text-neutral-600 dark:text-neutral-400">
          Everything you need to know to start building with our platform
        </p>
      </div>

      <div className="grid md:grid-cols-3 gap-6 mb-12">
"""
    + _feature_card(
        "Zap",
        "yellow",
        "Quick Setup",
        "Get up and running in minutes with our streamlined setup process",
        "Follow our step-by-step guide to configure your environment and start building.",
    )
    + "\n"
    + _feature_card(
        "Code",
        "blue",
        "Documentation",
        "Comprehensive guides and API references at your fingertips",
        "Explore detailed documentation covering every feature and functionality.",
    )
    + "\n"
    + _feature_card(
        "Palette",
        "purple",
        "Customize",
        "Tailor the platform to match your unique requirements",
        "Personalize themes, components, and workflows to fit your needs.",
    )
    + """      </div>

      <div className="bg-neutral-50 dark:bg-neutral-900 rounded-lg p-8 mb-12">
        <h2 className="text-2xl font-bold mb-4 text-black dark:text-white">
          Quick Start Guide
        </h2>
        <ol className="space-y-4">
"""
    + _quick_start_item(
        1,
        "Install Dependencies",
        "Run npm install to set up all required packages and dependencies.",
    )
    + _quick_start_item(
        2,
        "Configure Environment",
        "Set up your environment variables in the .env file for local development.",
    )
    + _quick_start_item(
        3,
        "Start Development Server",
        "Run npm run dev to start the development server and begin building.",
    )
    + """        </ol>
      </div>

      <div className="text-center">
        <Button asChild size="lg">
          <Link href="/contact" className="gap-2">
            Need Help? Contact Us
            <ArrowRight className="h-4 w-4" />
          </Link>
        </Button>
      </div>

      <div className="text-center mt-12">
        <Link href="/" className="text-neutral-600 dark:text-neutral-400 hover:text-black dark:hover:text-white transition-colors text-lg">
          ← Back to Home
        </Link>
      </div>
    </div>
  )
}
"""
)

MAIN_PAGE = """export default function Home() {
  return (
    <div className="container mx-auto px-4 py-16 max-w-2xl">
      <h1 className="text-4xl font-bold text-left mb-6 text-black dark:text-white">
        Hello
      </h1>
      <p className="text-lg text-left text-neutral-600 dark:text-neutral-400">
        Welcome to your new Next.js app with shadcn/ui.
      </p>
    </div>
  )
}
"""

NOT_FOUND_PAGE = """import Link from "next/link"
import { Button } from "@/components/ui/button"

export default function NotFound() {
  return (
    <div className="container mx-auto px-4 py-16 max-w-2xl text-center">
      <h1 className="text-6xl font-bold mb-4 text-black dark:text-white">404</h1>
      <h2 className="text-2xl font-semibold mb-6 text-neutral-600 dark:text-neutral-400">
        Page Not Found
      </h2>
      <p className="text-lg mb-8 text-neutral-600 dark:text-neutral-400">
        The page you are looking for doesn't exist or has been moved.
      </p>
      <Button asChild>
        <Link href="/">Go Home</Link>
      </Button>
    </div>
  )
}
"""

ERROR_PAGE = """"use client"

import { useEffect } from "react"
import { Button } from "@/components/ui/button"

export default function Error({
  error,
  reset,
}: {
  error: Error & { digest?: string }
  reset: () => void
}) {
  useEffect(() => {
    console.error(error)
  }, [error])

  return (
    <div className="container mx-auto px-4 py-16 max-w-2xl text-center">
      <h1 className="text-4xl font-bold mb-4 text-black dark:text-white">
        Something went wrong!
      </h1>
      <p className="text-lg mb-8 text-neutral-600 dark:text-neutral-400">
        An unexpected error has occurred.
      </p>
      <Button onClick={reset}>Try Again</Button>
    </div>
  )
}
"""

LOADING_PAGE = """import { Skeleton } from "@/components/ui/skeleton"

export default function Loading() {
  return (
    <div className="container mx-auto px-4 py-16 max-w-2xl">
      <Skeleton className="h-12 w-3/4 mb-6" />
      <Skeleton className="h-4 w-full mb-4" />
      <Skeleton className="h-4 w-full mb-4" />
      <Skeleton className="h-4 w-2/3" />
    </div>
  )
}
"""
